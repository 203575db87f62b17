"""Stream module from Clopt."""

import re
from typing import TextIO

from clopt.argument import Argument
from clopt.config import ParserConfig
from clopt.parser import classify

DEFAULT_TOKEN_DELIMITERS: str = " \t\r\n"


def split_stream(source: TextIO | str, delimiters: str = DEFAULT_TOKEN_DELIMITERS) -> list[str]:
    """
    Splits a text stream (or a string) into tokens on any of the delimiter characters.
    Empty tokens are dropped.
    """
    text: str = source if isinstance(source, str) else source.read()
    if not delimiters:
        return [text] if text else []
    return [token for token in re.split(f"[{re.escape(delimiters)}]", text) if token]


def parse_stream(
    source: TextIO | str,
    config: ParserConfig | None = None,
    delimiters: str = DEFAULT_TOKEN_DELIMITERS,
) -> tuple[Argument, ...]:
    """
    Classifies the tokens read from a text stream.
    """
    return classify(split_stream(source, delimiters), config)
