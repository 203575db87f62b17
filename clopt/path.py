"""Executable path resolution module from Clopt."""

import os
from collections.abc import Callable, Iterable

DEFAULT_PATH_DELIMITERS: str = "/\\"
DEFAULT_EXTENSIONS: tuple[str, ...] = (".exe", ".bat", ".so")


def split_path(arg: str, delimiters: str = DEFAULT_PATH_DELIMITERS) -> tuple[str, str]:
    """
    Splits a path into (directory, name). The directory keeps its trailing delimiter.
    Example: "/usr/bin/env" --> ("/usr/bin/", "env")
    """
    pos: int = max(arg.rfind(d) for d in delimiters) if delimiters else -1
    if pos == -1:
        return ("", arg)
    return (arg[: pos + 1], arg[pos + 1 :])


def resolve_split_path(
    search_path: Iterable[str],
    arg: str,
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
    exists: Callable[[str], bool] | None = None,
    separator: str = "/",
) -> tuple[str, str]:
    """
    Finds where a program (usually argv[0]) lives, as (directory, name).
    An explicit directory without '.' in it is trusted as-is, otherwise every
    search directory is tried with the name alone then with each extension.
    Returns ("", arg) if it can't be found.
    """
    if exists is None:
        exists = os.path.isfile

    directory, name = split_path(arg)
    if directory and "." not in directory:
        return (directory, name)

    extensions = tuple(extensions)
    for entry in search_path:
        target: str = entry if entry.endswith(separator) else entry + separator
        if exists(target + arg):
            return (target, arg)
        for ext in extensions:
            if exists(target + arg + ext):
                return (target, arg + ext)

    return ("", arg)


def resolve_path(
    search_path: Iterable[str],
    arg: str,
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
    exists: Callable[[str], bool] | None = None,
) -> str:
    """
    Same as `resolve_split_path`, joined into a single path.
    """
    directory, name = resolve_split_path(search_path, arg, extensions, exists)
    return directory + name
