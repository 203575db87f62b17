"""Argument module from Clopt."""

from __future__ import annotations

from enum import Enum
from dataclasses import dataclass
from typing import ClassVar, TypeAlias, assert_never


LONG_PREFIX: str = "--"
SHORT_PREFIX: str = "-"


class ArgKind(Enum):
    """
    Enum representing the three kinds of classified command line arguments.
    """

    Parameter = "parameter"  # Bare value, no prefix
    Option = "option"  # Two prefix characters (--name)
    Flag = "flag"  # One prefix character, one character per flag (-f)


@dataclass(slots=True)
class WrongVariantKind(Exception):
    """
    Clopt Exception class raised when an argument is used as a kind it is not.
    """

    msg: str
    expected: ArgKind | None = None
    actual: ArgKind | None = None


class _ArgumentBase:
    """
    Behaviour shared by the three argument kinds.
    Subclasses are frozen dataclasses, so equality also compares the kind.
    """

    __slots__ = ()

    # Provided by each kind as a dataclass field or a property
    kind: ClassVar[ArgKind]
    name: str
    captured: str | None

    def has_captured_value(self) -> bool:
        return self.captured is not None

    def as_parameter(self) -> Parameter | None:
        """
        Returns this argument if it is a `Parameter`, None otherwise.
        """
        return self if isinstance(self, Parameter) else None

    def as_option(self) -> Option | None:
        """
        Returns this argument if it is an `Option`, None otherwise.
        """
        return self if isinstance(self, Option) else None

    def as_flag(self) -> Flag | None:
        """
        Returns this argument if it is a `Flag`, None otherwise.
        """
        return self if isinstance(self, Flag) else None

    def is_kind(self, kind: ArgKind) -> bool:
        return self.kind is kind

    def expect(self, kind: ArgKind) -> Argument:
        """
        Returns this argument if it is of the given kind.
        Raises `WrongVariantKind` otherwise, check `kind` first to avoid it.
        """
        if self.kind is not kind:
            raise WrongVariantKind(
                f"Argument '{self}' is a {self.kind.value}, not a {kind.value}.",
                expected=kind,
                actual=self.kind,
            )
        return self  # type: ignore[return-value]

    def render(self, prefix: str = SHORT_PREFIX) -> str:
        """
        Canonical text of the argument, as it would be written on the command line.
        Captured values are not rendered.
        """
        arg: Argument = self  # type: ignore[assignment]
        match arg:
            case Parameter(value=value):
                return value
            case Option(name=name):
                return f"{prefix * 2}{name}"
            case Flag(symbol=symbol):
                return f"{prefix}{symbol}"
            case _:
                assert_never(arg)

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True, slots=True)
class Parameter(_ArgumentBase):
    """
    A bare token without prefix.
    """

    kind: ClassVar[ArgKind] = ArgKind.Parameter

    value: str

    @property
    def name(self) -> str:
        return self.value

    @property
    def captured(self) -> None:
        return None


@dataclass(frozen=True, slots=True)
class Option(_ArgumentBase):
    """
    A long option (--name), with the token that followed it if it was captured.
    """

    kind: ClassVar[ArgKind] = ArgKind.Option

    name: str
    captured: str | None = None


@dataclass(frozen=True, slots=True)
class Flag(_ArgumentBase):
    """
    A single character flag (-f), with the token that followed it if it was captured.
    Several flags can come from one bundled token (-abc).
    """

    kind: ClassVar[ArgKind] = ArgKind.Flag

    symbol: str
    captured: str | None = None

    def __post_init__(self) -> None:
        if len(self.symbol) != 1:
            raise ValueError(f"A flag symbol must be a single character ({self.symbol!r}).")

    @property
    def name(self) -> str:
        return self.symbol


Argument: TypeAlias = Parameter | Option | Flag
