import colorsys
import enum
import math

import glm
import numpy as np
import pygame


# === Color Bases =============================================================

class ColorBase(enum.Enum):
    BLACK = "black"
    WHITE = "white"
    RED = "red"
    GREEN = "green"
    BLUE = "blue"

    def to_hsv(self) -> glm.vec3:
        """Canonical HSV for this base as (hue degrees, saturation, value)."""
        return glm.vec3(BASE_HSV[self])

    def successor(self) -> "ColorBase":
        return BASE_SUCCESSOR[self]


# Hue in degrees; saturation and value in 0-1
BASE_HSV = {
    ColorBase.BLACK: glm.vec3(0.0, 0.0, 0.0),
    ColorBase.WHITE: glm.vec3(0.0, 0.0, 1.0),
    ColorBase.RED: glm.vec3(0.0, 1.0, 1.0),
    ColorBase.GREEN: glm.vec3(120.0, 1.0, 1.0),
    ColorBase.BLUE: glm.vec3(240.0, 1.0, 1.0),
}

# NOTE: Two separate cycles; red/green/blue never reaches white/black
BASE_SUCCESSOR = {
    ColorBase.RED: ColorBase.GREEN,
    ColorBase.GREEN: ColorBase.BLUE,
    ColorBase.BLUE: ColorBase.RED,
    ColorBase.WHITE: ColorBase.BLACK,
    ColorBase.BLACK: ColorBase.WHITE,
}

WHITE_HSV = glm.vec3(BASE_HSV[ColorBase.WHITE])

# === Conversion ==============================================================


def srgb_to_linear(rgb: np.ndarray) -> np.ndarray:
    """
    Decode gamma-encoded sRGB channels (0-1) into linear light.
    Channels above the 0.04045 knee use the 2.4 power curve.
    """
    curve = ((np.maximum(rgb, 0.04045) + 0.055) / 1.055) ** 2.4
    return np.where(rgb <= 0.04045, rgb / 12.92, curve)


def hsv_to_color(hsv: glm.vec3) -> pygame.Color:
    """
    Convert an HSV triple into an opaque 8-bit pygame color.

    Hue wraps around when converted but saturation and value are taken as-is,
    so out of range triples still convert; the bytes saturate at 0 and 255.
    A NaN or infinite hue is read as 0 and NaN channels come out as 0.
    Scaling by 255 truncates instead of rounding.
    """
    hue, saturation, value = (float(c) for c in hsv)
    if not math.isfinite(hue):
        hue = 0.0
    rgb = np.array(colorsys.hsv_to_rgb(hue / 360.0, saturation, value),
                   dtype=np.float64)

    linear = srgb_to_linear(rgb) * 255.0
    linear = np.nan_to_num(linear, nan=0.0, posinf=255.0, neginf=0.0)
    r, g, b = np.clip(np.trunc(linear), 0, 255).astype(np.uint8)

    return pygame.Color(int(r), int(g), int(b), 255)
