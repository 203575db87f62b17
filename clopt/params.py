"""Query module from Clopt."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import assert_never, overload

from clopt.argument import Argument, ArgKind, Parameter, Option, Flag
from clopt.config import ParserConfig
from clopt.parser import classify


@dataclass(slots=True)
class ArgumentIndexError(IndexError):
    """
    Clopt Exception class for positional access outside of the parsed arguments.
    """

    msg: str


class Params:
    """
    Read-only view over classified command line arguments.
    Every position is an index into the arguments, in command line order.
    Search methods return None where nothing matched.
    """

    __slots__ = ("_args", "_arg0")

    _args: tuple[Argument, ...]
    _arg0: str | None

    def __init__(self, args: Iterable[Argument] = (), arg0: str | None = None) -> None:
        self._args = tuple(args)
        self._arg0 = arg0

    # =============================================
    #                 Constructors
    # =============================================
    @classmethod
    def parse(
        cls,
        tokens: Iterable[str],
        config: ParserConfig | None = None,
        *,
        arg0: str | None = None,
    ) -> Params:
        """
        Classifies the tokens with `config` (or the default config).
        """
        return cls(classify(tokens, config), arg0)

    @classmethod
    def from_argv(cls, argv: Sequence[str], config: ParserConfig | None = None) -> Params:
        """
        Classifies a full process argument vector. The first element is kept
        apart as `arg0` (usually the program name) and isn't classified.
        """
        if len(argv) == 0:
            return cls((), None)
        return cls.parse(argv[1:], config, arg0=argv[0])

    @classmethod
    def with_captures(cls, tokens: Iterable[str], *names: str) -> Params:
        """
        Classifies the tokens with a default config where `names` can capture.
        """
        return cls.parse(tokens, ParserConfig.with_captures(*names))

    # =============================================
    #                Sequence access
    # =============================================
    @property
    def arg0(self) -> str | None:
        return self._arg0

    @property
    def arguments(self) -> tuple[Argument, ...]:
        return self._args

    def __len__(self) -> int:
        return len(self._args)

    def __iter__(self) -> Iterator[Argument]:
        return iter(self._args)

    @overload
    def __getitem__(self, pos: int) -> Argument: ...
    @overload
    def __getitem__(self, pos: slice) -> tuple[Argument, ...]: ...

    def __getitem__(self, pos: int | slice) -> Argument | tuple[Argument, ...]:
        if isinstance(pos, slice):
            return self._args[pos]
        return self.at(pos)

    def at(self, pos: int) -> Argument:
        """
        Returns the argument at a position. Negative positions count from the end.
        """
        try:
            return self._args[pos]
        except IndexError:
            raise ArgumentIndexError(
                f"Position {pos} is out of range for {len(self._args)} argument(s)."
            ) from None

    def first(self) -> Argument | None:
        return self._args[0] if self._args else None

    def last(self) -> Argument | None:
        return self._args[-1] if self._args else None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Params):
            return NotImplemented
        return self._args == other._args and self._arg0 == other._arg0

    def __hash__(self) -> int:
        return hash((self._args, self._arg0))

    def __repr__(self) -> str:
        return f"Params({list(self._args)!r}, arg0={self._arg0!r})"

    def __str__(self) -> str:
        """
        Same format as the command line, arguments separated by spaces.
        """
        return " ".join(str(arg) for arg in self._args)

    # =============================================
    #                Search methods
    # =============================================
    def find(
        self,
        key: str,
        offset: int = 0,
        *,
        kind: ArgKind | None = None,
        check_captures: bool = False,
    ) -> int | None:
        """
        Returns the position of the first argument matching `key`, starting at `offset`.

        Without `kind`, a key matches a Parameter value or an Option name, and
        single character keys also match Flag symbols.
        With `kind`, only arguments of that kind with that name match.
        `check_captures` also matches captured values of Options and Flags.
        """
        for pos in range(max(offset, 0), len(self._args)):
            if _matches(self._args[pos], key, kind, check_captures):
                return pos
        return None

    def find_all(
        self,
        key: str,
        *,
        kind: ArgKind | None = None,
        check_captures: bool = False,
    ) -> list[int]:
        """
        Returns the positions of every argument matching `key`, in ascending order.
        """
        positions: list[int] = []
        pos: int | None = self.find(key, 0, kind=kind, check_captures=check_captures)
        while pos is not None:
            positions.append(pos)
            pos = self.find(key, pos + 1, kind=kind, check_captures=check_captures)
        return positions

    def get(self, key: str, offset: int = 0, *, kind: ArgKind | None = None) -> Argument | None:
        """
        Returns the first argument matching `key`, starting at `offset`.
        """
        pos: int | None = self.find(key, offset, kind=kind)
        return None if pos is None else self._args[pos]

    def get_captured_value(self, key: str, offset: int = 0, *, kind: ArgKind | None = None) -> str | None:
        """
        Returns the value captured by the first argument matching `key`.
        None if nothing matched or if it didn't capture anything.
        """
        arg: Argument | None = self.get(key, offset, kind=kind)
        return None if arg is None else arg.captured

    def get_captured_values(self, key: str, *, kind: ArgKind | None = None) -> list[str]:
        """
        Returns the values captured by every argument matching `key`, in order.
        Useful for repeated options (Example: --include a --include b).
        """
        values: list[str] = []
        for pos in self.find_all(key, kind=kind):
            captured: str | None = self._args[pos].captured
            if captured is not None:
                values.append(captured)
        return values

    def contains(self, key: str, *, check_captures: bool = False) -> bool:
        return self.find(key, check_captures=check_captures) is not None

    def __contains__(self, key: object) -> bool:
        if isinstance(key, _ARGUMENT_TYPES):
            return key in self._args
        return isinstance(key, str) and self.contains(key)

    # =============================================
    #                 Check methods
    # =============================================
    def check(self, key: str, kind: ArgKind | None = None) -> bool:
        return self.find(key, kind=kind) is not None

    def check_kind(self, key: str, kind: ArgKind) -> bool:
        """
        Checks if an argument of the given kind with the given name was parsed.
        """
        return self.check(key, kind)

    def check_parameter(self, key: str) -> bool:
        return self.check(key, ArgKind.Parameter)

    def check_option(self, key: str) -> bool:
        return self.check(key, ArgKind.Option)

    def check_flag(self, key: str) -> bool:
        return self.check(key, ArgKind.Flag)

    def check_any(self, keys: Iterable[str], kind: ArgKind | None = None) -> bool:
        """
        True if at least one of the keys was parsed. False for no keys.
        """
        return any(self.check(key, kind) for key in keys)

    def check_all(self, keys: Iterable[str], kind: ArgKind | None = None) -> bool:
        """
        True if every key was parsed. True for no keys.
        """
        return all(self.check(key, kind) for key in keys)

    # =============================================
    #                Filter methods
    # =============================================
    def all_of_kind(self, kind: ArgKind, start: int = 0, stop: int | None = None) -> list[Argument]:
        """
        Returns the arguments of a kind between `start` and `stop`, in command line order.
        """
        return [arg for arg in self._args[start:stop] if arg.kind is kind]

    def positions_of_kind(self, kind: ArgKind) -> list[int]:
        return [pos for pos, arg in enumerate(self._args) if arg.kind is kind]

    def parameters(self) -> list[Parameter]:
        return [arg for arg in self._args if isinstance(arg, Parameter)]

    def options(self) -> list[Option]:
        return [arg for arg in self._args if isinstance(arg, Option)]

    def flags(self) -> list[Flag]:
        return [arg for arg in self._args if isinstance(arg, Flag)]


_ARGUMENT_TYPES = (Parameter, Option, Flag)


def _matches(arg: Argument, key: str, kind: ArgKind | None, check_captures: bool) -> bool:
    if kind is not None and arg.kind is not kind:
        return False
    if check_captures and arg.captured == key:
        return True
    if kind is not None:
        return arg.name == key

    match arg:
        case Parameter(value=value):
            return value == key
        case Option(name=name):
            return name == key
        case Flag(symbol=symbol):
            return symbol == key  # Only single character keys can match
        case _:
            assert_never(arg)
