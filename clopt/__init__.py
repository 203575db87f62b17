"""Clopt, a command line argument classifier."""

from .argument import Argument, ArgKind, Parameter, Option, Flag, WrongVariantKind
from .config import ParserConfig
from .parser import classify
from .params import Params, ArgumentIndexError

__all__: list[str] = [
    "Argument",
    "ArgKind",
    "Parameter",
    "Option",
    "Flag",
    "WrongVariantKind",
    "ParserConfig",
    "classify",
    "Params",
    "ArgumentIndexError",
]
