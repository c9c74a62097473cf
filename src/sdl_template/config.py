import argparse
import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

# === Defaults ================================================================

APP_NAME = "SDL2 Template"
APP_VERSION = "0.1"
APP_ABOUT = "SDL2 template project."

DEFAULT_FPS = 60  # fps
DEFAULT_WINDOW_WIDTH = 800  # pixels
DEFAULT_WINDOW_HEIGHT = 600  # pixels
DEFAULT_FLASH_INTERVAL = 7  # seconds
DEFAULT_FLASH_DURATION = 1  # frames

U32_MAX = 2 ** 32 - 1  # Largest accepted numeric setting


@dataclass(frozen=True)
class Config:
    window_title: str = APP_NAME
    window_width: int = DEFAULT_WINDOW_WIDTH
    window_height: int = DEFAULT_WINDOW_HEIGHT
    fullscreen: bool = False
    fps: int = DEFAULT_FPS
    flash_interval: int = DEFAULT_FLASH_INTERVAL
    flash_duration: int = DEFAULT_FLASH_DURATION


# === Lenient Parsing =========================================================

def parse_int(key: str, raw: str | None, default: int, minimum: int = 1) -> int:
    """
    Parse an unsigned 32-bit setting, falling back to the default on bad input.

    Only ASCII digits with an optional leading "+" are accepted; whitespace,
    underscores, signs other than "+" and values past 2**32 - 1 are bad
    input, and so are values below minimum.
    """
    logger.debug("%s %r", key, raw)
    if raw is None:
        return default

    digits = raw[1:] if raw.startswith("+") else raw
    if not (digits.isascii() and digits.isdigit()):
        return default

    value = int(digits)
    if value > U32_MAX or value < minimum:
        return default
    return value


def parse_bool(key: str, raw: str | None, default: bool = False) -> bool:
    """Only the exact strings "true" and "false" are understood."""
    logger.debug("%s %r", key, raw)
    if raw == "true":
        return True
    if raw == "false":
        return False
    return default


# === Command Line ============================================================

def build_parser(environ) -> argparse.ArgumentParser:
    # -h is taken by --height, so help only gets the long form
    parser = argparse.ArgumentParser(prog=APP_NAME, description=APP_ABOUT,
                                     add_help=False)
    parser.add_argument("--help", action="help",
                        help="Print help information.")
    parser.add_argument("-V", "--version", action="version",
                        version=f"{APP_NAME} {APP_VERSION}")

    # Environment variables replace the defaults; flags replace both
    parser.add_argument("-t", "--title", dest="window_title",
                        default=environ.get("WINDOW_TITLE", APP_NAME),
                        help="Window title. [env: WINDOW_TITLE]")
    parser.add_argument("-w", "--width", dest="window_width",
                        default=environ.get("WINDOW_WIDTH",
                                            str(DEFAULT_WINDOW_WIDTH)),
                        help="Window width. [env: WINDOW_WIDTH]")
    parser.add_argument("-h", "--height", dest="window_height",
                        default=environ.get("WINDOW_HEIGHT",
                                            str(DEFAULT_WINDOW_HEIGHT)),
                        help="Window height. [env: WINDOW_HEIGHT]")
    parser.add_argument("--fullscreen", action="store_true",
                        help="Launch in fullscreen mode. [env: FULLSCREEN=true]")
    parser.add_argument("-f", "--fps", dest="fps",
                        default=environ.get("FPS", str(DEFAULT_FPS)),
                        help="Target FPS. [env: FPS]")
    parser.add_argument("-i", "--interval", dest="flash_interval",
                        default=environ.get("FLASH_INTERVAL",
                                            str(DEFAULT_FLASH_INTERVAL)),
                        help="Flash interval in seconds. [env: FLASH_INTERVAL]")
    parser.add_argument("-d", "--duration", dest="flash_duration",
                        default=environ.get("FLASH_DURATION",
                                            str(DEFAULT_FLASH_DURATION)),
                        help="Flash duration in frames. [env: FLASH_DURATION]")
    return parser


def parse_args(argv: list[str] | None = None, environ=None) -> Config:
    """
    Build the run configuration from command line flags and the environment.

    Numeric values that do not parse, or are out of range, quietly become
    their defaults. Fullscreen is on with --fullscreen or FULLSCREEN=true.
    """
    if environ is None:
        environ = os.environ

    args = build_parser(environ).parse_args(argv)

    fullscreen = args.fullscreen or parse_bool(
        "env_fullscreen", environ.get("FULLSCREEN", "false"))

    return Config(
        window_title=args.window_title,
        window_width=parse_int("window_width", args.window_width,
                               DEFAULT_WINDOW_WIDTH),
        window_height=parse_int("window_height", args.window_height,
                                DEFAULT_WINDOW_HEIGHT),
        fullscreen=fullscreen,
        fps=parse_int("fps", args.fps, DEFAULT_FPS),
        flash_interval=parse_int("flash_interval", args.flash_interval,
                                 DEFAULT_FLASH_INTERVAL),
        # Zero is allowed and turns the flash off
        flash_duration=parse_int("flash_duration", args.flash_duration,
                                 DEFAULT_FLASH_DURATION, minimum=0),
    )


def log_config(config: Config):
    logger.info("SDL Window Title: %s", config.window_title)
    logger.info("SDL Window Width: %d pixels", config.window_width)
    logger.info("SDL Window Height: %d pixels", config.window_height)
    logger.info("SDL Window Fullscreen: %s", config.fullscreen)
    logger.info("FPS: %d", config.fps)
    logger.info("Flash Interval: %d seconds", config.flash_interval)
    logger.info("Flash Duration: %d frames", config.flash_duration)
