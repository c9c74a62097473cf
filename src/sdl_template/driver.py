import logging
import time

import pygame

from .color import hsv_to_color
from .state import State, advance

logger = logging.getLogger(__name__)

NANOSECONDS_PER_SECOND = 1_000_000_000


def frame_delay(fps: int) -> float:
    """Seconds to sleep after every frame, whole nanoseconds."""
    return (NANOSECONDS_PER_SECOND // fps) / NANOSECONDS_PER_SECOND


def handle_events(state: State, events):
    for event in events:
        # Quit mechanism; window close or escape
        if event.type == pygame.QUIT or (
                event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE):
            state.running = False

        # Skip mouse motion, it floods the log
        if event.type != pygame.MOUSEMOTION:
            logger.info("SDL2 Event: %s", event)


def render(state: State, window, sleep=time.sleep):
    window.clear_and_present(hsv_to_color(state.current_color))

    # Fixed sleep; time spent on input and update is not subtracted
    sleep(frame_delay(state.fps))


def run_loop(state: State, window, poll_events=None, sleep=time.sleep):
    """
    Run input, update and output once per frame until state.running is
    cleared. The frame that clears it still gets drawn.
    """
    if poll_events is None:
        poll_events = window.poll_events

    while state.running:
        handle_events(state, poll_events())
        advance(state)
        render(state, window, sleep)
