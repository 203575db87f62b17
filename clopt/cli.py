"""Command line entry point from Clopt: prints how its own arguments are classified."""

import logging
import sys
from collections.abc import Callable, Sequence

from clopt.argument import Argument
from clopt.config import ParserConfig
from clopt.env import Environment
from clopt.log import get_logger, setup_logger
from clopt.params import Params

CAPTURE_ENV_VAR: str = "CLOPT_CAPTURE"
LOG_LEVEL_ENV_VAR: str = "CLOPT_LOG_LEVEL"

logger = get_logger(__name__)


def describe(pos: int, arg: Argument) -> str:
    """
    Example: "2 option out = b.txt"
    """
    line: str = f"{pos} {arg.kind.value} {arg.name}"
    if arg.captured is not None:
        line += f" = {arg.captured}"
    return line


def config_from_env(env: Environment) -> ParserConfig:
    names: list[str] = [
        name.strip() for name in (env.get(CAPTURE_ENV_VAR) or "").split(",") if name.strip()
    ]
    return ParserConfig.with_captures(*names)


def main(
    argv: Sequence[str] | None = None,
    env: Environment | None = None,
    print_method: Callable[[str], None] = print,
) -> int:
    if argv is None:
        argv = sys.argv
    if env is None:
        env = Environment()

    level: str = (env.get(LOG_LEVEL_ENV_VAR) or "WARNING").upper()
    setup_logger(logging.getLevelNamesMapping().get(level, logging.WARNING))

    config: ParserConfig = config_from_env(env)
    logger.debug("Capturing arguments: %s", ", ".join(sorted(config.capture_names)) or "none")

    params: Params = Params.from_argv(argv, config)
    for pos, arg in enumerate(params):
        print_method(describe(pos, arg))
    return 0


if __name__ == "__main__":
    sys.exit(main())
