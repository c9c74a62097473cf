"""
Tests for window setup with pygame's display and ModernGL mocked out
"""

import os
from unittest.mock import MagicMock

import moderngl
import pygame
import pytest

from sdl_template.window import Window, create_window


@pytest.fixture
def display(monkeypatch):
    """Replace every pygame/ModernGL call that needs a real video device."""
    calls = MagicMock()
    ctx = MagicMock()
    ctx.info = {"GL_VERSION": "3.3"}
    calls.create_context.return_value = ctx

    monkeypatch.setattr(pygame, "init", calls.init)
    monkeypatch.setattr(pygame, "quit", calls.quit)
    monkeypatch.setattr(pygame.display, "gl_set_attribute",
                        calls.gl_set_attribute)
    monkeypatch.setattr(pygame.display, "set_mode", calls.set_mode)
    monkeypatch.setattr(pygame.display, "set_caption", calls.set_caption)
    monkeypatch.setattr(pygame.display, "flip", calls.flip)
    monkeypatch.setattr(moderngl, "create_context", calls.create_context)
    # Set first so the original value comes back after the test
    monkeypatch.setenv("SDL_VIDEO_CENTERED", "0")
    monkeypatch.delenv("SDL_VIDEO_CENTERED")
    return calls


def test_create_window(display):
    window = create_window("Title", 640, 480)

    assert isinstance(window, Window)
    assert window.ctx is display.create_context.return_value
    display.set_mode.assert_called_once_with(
        (640, 480), pygame.OPENGL | pygame.DOUBLEBUF | pygame.RESIZABLE)
    display.set_caption.assert_called_once_with("Title")
    assert os.environ["SDL_VIDEO_CENTERED"] == "1"


def test_create_fullscreen_window_uses_desktop_size(display):
    create_window("Title", 640, 480, fullscreen=True)

    size, flags = display.set_mode.call_args.args
    assert size == (0, 0)
    assert flags & pygame.FULLSCREEN


def test_display_failure_propagates_and_shuts_down(display):
    display.set_mode.side_effect = pygame.error("No available video device")

    with pytest.raises(pygame.error, match="No available video device"):
        create_window("Title", 640, 480)

    display.quit.assert_called_once()
    display.create_context.assert_not_called()


def test_context_failure_propagates_and_shuts_down(display):
    display.create_context.side_effect = moderngl.Error("no context")

    with pytest.raises(moderngl.Error):
        create_window("Title", 640, 480)

    display.quit.assert_called_once()


def test_clear_and_present_normalizes_color(display):
    ctx = MagicMock()
    window = Window(ctx)

    window.clear_and_present(pygame.Color(255, 0, 51, 255))

    ctx.clear.assert_called_once_with(1.0, 0.0, 0.2, 1.0)
    display.flip.assert_called_once()


def test_poll_events_tracks_resize(monkeypatch):
    resize = pygame.event.Event(pygame.VIDEORESIZE, w=1024, h=768,
                                size=(1024, 768))
    monkeypatch.setattr(pygame.event, "get", lambda: [resize])
    ctx = MagicMock()

    events = Window(ctx).poll_events()

    assert events == [resize]
    assert ctx.viewport == (0, 0, 1024, 768)


def test_close_releases_context(display):
    ctx = MagicMock()

    Window(ctx).close()

    ctx.release.assert_called_once()
    display.quit.assert_called_once()
