from .color import ColorBase, WHITE_HSV, hsv_to_color
from .config import Config, parse_args
from .driver import run_loop
from .state import State, advance
from .window import Window, create_window

__version__ = "0.1"
