import logging
import os
import sys

import moderngl
import pygame

from .config import log_config, parse_args
from .driver import run_loop
from .state import State
from .window import create_window

logger = logging.getLogger("sdl_template")


def configure_logging(environ=None):
    if environ is None:
        environ = os.environ

    # Same [LEVEL] prefix the console messages have always had
    level = logging.getLevelName(environ.get("LOG_LEVEL", "INFO").upper())
    if not isinstance(level, int):
        level = logging.INFO

    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def main(argv: list[str] | None = None) -> int:
    configure_logging()

    config = parse_args(argv)
    log_config(config)

    state = State.from_config(config)

    try:
        window = create_window(config.window_title, config.window_width,
                               config.window_height, config.fullscreen)
    except (pygame.error, moderngl.Error) as e:
        logger.error("%s", e)
        return 1

    try:
        run_loop(state, window)
    finally:
        window.close()

    return 0


if __name__ == "__main__":
    sys.exit(main())
