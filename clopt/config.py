"""Parser configuration module from Clopt."""

from collections.abc import Iterable
from dataclasses import dataclass, field

DEFAULT_PREFIX_CHARS: frozenset[str] = frozenset("-")
MAX_PREFIX_COUNT: int = 2


@dataclass(frozen=True, slots=True)
class ParserConfig:
    """
    Options used by `classify` to decide what each token is.

    capture_names: option names and flag characters (without prefix) that capture the token after them.
    prefix_chars: characters accepted as prefix delimiters.
    allow_negative_numbers: when true, '-' followed only by digits and '.' is a Parameter, not a flag cluster.
    """

    capture_names: frozenset[str] = field(default_factory=frozenset)
    prefix_chars: frozenset[str] = DEFAULT_PREFIX_CHARS
    allow_negative_numbers: bool = True

    def __post_init__(self) -> None:
        # Accept any iterable (list, tuple, str for prefix_chars) and freeze it
        object.__setattr__(self, "capture_names", frozenset(self.capture_names))
        object.__setattr__(self, "prefix_chars", frozenset(self.prefix_chars))

    @classmethod
    def with_captures(cls, *names: str, prefix_chars: Iterable[str] = DEFAULT_PREFIX_CHARS) -> "ParserConfig":
        """
        Builds a config where the given names can capture, using the default prefix set.
        """
        return cls(capture_names=frozenset(names), prefix_chars=frozenset(prefix_chars))

    def is_delimiter(self, c: str) -> bool:
        return c in self.prefix_chars

    def count_prefix(self, token: str, max: int = MAX_PREFIX_COUNT) -> int:
        """
        Counts the leading prefix delimiters of a token, never more than `max` (itself capped at 2).
        """
        limit: int = min(max, MAX_PREFIX_COUNT)
        count: int = 0
        for c in token[:limit]:
            if not self.is_delimiter(c):
                break
            count += 1
        return count

    def allows_capture(self, token: str) -> bool:
        """
        Checks if a token (or a single flag character) is allowed to capture the following token.
        The counted prefix is stripped before comparing.
        """
        if not token or not self.capture_names:
            return False
        return token[self.count_prefix(token):] in self.capture_names
