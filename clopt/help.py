"""Argument documentation module from Clopt."""

from collections.abc import Iterable
from dataclasses import dataclass

from clopt.argument import LONG_PREFIX, SHORT_PREFIX
from clopt.params import Params

DEFAULT_MARGIN_WIDTH: int = 20


@dataclass(slots=True)
class ArgumentDocError(Exception):
    """
    Clopt Exception class for errors related to `ArgumentDoc` objects.
    """

    msg: str


@dataclass(frozen=True, slots=True)
class ArgumentDoc:
    """
    One user facing argument, written as a flag (-h), an option (--help) or both.
    """

    flag: str | None = None
    option: str | None = None
    doc: str | None = None

    def __post_init__(self) -> None:
        if self.flag is None and self.option is None:
            raise ArgumentDocError("An argument needs at least a flag or an option name.")
        if self.flag is not None and len(self.flag) != 1:
            raise ArgumentDocError(f"Flag names can only be a single character ({self.flag}).")
        if self.option is not None and len(self.option) == 0:
            raise ArgumentDocError("Option names can't be empty.")

    def alias_help_text(self) -> str:
        """
        Example: "-h  --help"
        """
        aliases: list[str] = []
        if self.flag is not None:
            aliases.append(f"{SHORT_PREFIX}{self.flag}")
        if self.option is not None:
            aliases.append(f"{LONG_PREFIX}{self.option}")
        return "  ".join(aliases)


def check_arg(params: Params, argument: ArgumentDoc) -> bool:
    """
    Checks if an argument was given either as its flag or as its option.
    """
    return (argument.flag is not None and params.check_flag(argument.flag)) or (
        argument.option is not None and params.check_option(argument.option)
    )


def format_arg_doc(argument: ArgumentDoc, margin_width: int = DEFAULT_MARGIN_WIDTH) -> str:
    aliases: str = argument.alias_help_text()
    if argument.doc is None:
        return aliases
    # Aliases wider than the margin still get one space before the doc
    return f"{aliases.ljust(margin_width - 1)} {argument.doc}"


def format_help(arguments: Iterable[ArgumentDoc], margin_width: int = DEFAULT_MARGIN_WIDTH) -> str:
    """
    One line per argument, docs aligned on `margin_width`.
    """
    return "\n".join(format_arg_doc(arg, margin_width) for arg in arguments)
