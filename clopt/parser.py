"""Classifier module from Clopt."""

from collections.abc import Iterable

from clopt.argument import Argument, Parameter, Option, Flag
from clopt.config import ParserConfig
from clopt.log import get_logger


HEX_PREFIX: str = "0x"
NUMBER_CHARS: frozenset[str] = frozenset("0123456789.")

logger = get_logger(__name__)


def classify(tokens: Iterable[str], config: ParserConfig | None = None) -> tuple[Argument, ...]:
    """
    Classifies a list of command line tokens into Parameters, Options and Flags.
    The result keeps the command line order. Tokens captured by an Option or Flag
    don't appear as arguments of their own.

    Example (with 'o' and 'out' allowed to capture):
        ["-vo", "a.txt", "--out", "b.txt", "src"]
        --> Flag('v'), Flag('o', 'a.txt'), Option('out', 'b.txt'), Parameter('src')
    """
    if config is None:
        config = ParserConfig()
    args: list[str] = list(tokens)
    parsed: list[Argument] = []
    captures: int = 0

    i: int = 0
    while i < len(args):
        token: str = args[i]
        following: str | None = args[i + 1] if i + 1 < len(args) else None

        match config.count_prefix(token):
            case 2:
                name: str = token[2:]
                if _can_capture(config, token, following):
                    parsed.append(Option(name, following))
                    captures += 1
                    i += 1  # Skip captured token
                else:
                    parsed.append(Option(name))

            case 1 if not _is_number_like(config, token[1:]):
                captured_here: bool = False
                for symbol in token[1:]:
                    # Only the first capturing flag of a bundle takes the following token
                    if not captured_here and _can_capture(config, symbol, following):
                        parsed.append(Flag(symbol, following))
                        captured_here = True
                    else:
                        parsed.append(Flag(symbol))
                if captured_here:
                    captures += 1
                    i += 1  # Skip captured token

            case _:
                # No prefix, negative number, or a lone prefix character
                parsed.append(Parameter(token))

        i += 1

    logger.debug(
        "Classified %d token(s) into %d argument(s) (%d capture(s)).",
        len(args),
        len(parsed),
        captures,
    )
    return tuple(parsed)


def _can_capture(config: ParserConfig, token: str, following: str | None) -> bool:
    """
    A token captures the one right after it, if it is allowed to and that one isn't prefixed.
    """
    if following is None or not config.allows_capture(token):
        return False
    return not (following and config.is_delimiter(following[0]))


def _is_number_like(config: ParserConfig, remainder: str) -> bool:
    """
    Checks if what follows a single prefix must be kept whole as a Parameter.
    '-1024' and '-.5' are numbers, '-0x00FE' is still a flag cluster.
    A lone prefix character ('-') has nothing to split and is always kept whole.
    """
    if not remainder:
        return True
    if not config.allow_negative_numbers or remainder.startswith(HEX_PREFIX):
        return False
    return all(c in NUMBER_CHARS for c in remainder)
