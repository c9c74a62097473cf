import logging

import glm

from .color import ColorBase
from .config import Config

logger = logging.getLogger(__name__)

# === Constants ===============================================================

FRAME_COUNTER_MODULUS = 2 ** 64  # Frame counter is a wrapping 64-bit unsigned
HUE_DEGREES_PER_SECOND = 60.0
PRINT_SECONDS = 60  # Seconds between state diagnostics


class State:
    """
    Everything the animation needs from one frame to the next.

    current_color is only ever derived by advance(); hsv_offset keeps growing
    by hsv_delta every frame and is never wrapped back into 0-360.
    """

    def __init__(self, fps: int, flash_interval: int, flash_duration: int,
                 color_base: ColorBase = ColorBase.RED):
        self.running = True
        self.fps = fps
        self.frame_counter = 0
        self.color_base = color_base

        # Only the hue channel drifts
        self.hsv_delta = glm.vec3(HUE_DEGREES_PER_SECOND / fps, 0.0, 0.0)
        self.hsv_offset = glm.vec3(0.0, 0.0, 0.0)
        self.current_color = color_base.to_hsv()

        self.flash_interval = flash_interval  # Seconds
        self.flash_duration = flash_duration  # Frames

    @classmethod
    def from_config(cls, config: Config) -> "State":
        return cls(config.fps, config.flash_interval, config.flash_duration)

    @property
    def hue_delta_per_frame(self) -> float:
        return self.hsv_delta.x

    @property
    def hue_offset(self) -> float:
        return self.hsv_offset.x

    def flash_timer(self) -> int:
        return self.frame_counter % (self.flash_interval * self.fps)

    def flashing(self) -> bool:
        return self.flash_timer() < self.flash_duration


def advance(state: State):
    """Step the animation by one frame."""
    flash_timer = state.flash_timer()
    flash = flash_timer < state.flash_duration

    # Next base color at the start of every flash period
    if flash_timer == 0:
        state.color_base = state.color_base.successor()

    state.hsv_offset = state.hsv_offset + state.hsv_delta

    if flash:
        state.current_color = ColorBase.WHITE.to_hsv()
    else:
        # Plain component-wise sum; no hue wrap and no clamping
        state.current_color = state.color_base.to_hsv() + state.hsv_offset

    if state.frame_counter % (PRINT_SECONDS * state.fps) == 0:
        logger.info("State Update: Frame %d => HSV %s",
                    state.frame_counter, state.current_color)

    state.frame_counter = (state.frame_counter + 1) % FRAME_COUNTER_MODULUS
