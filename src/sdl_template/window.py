import logging
import os

import moderngl
import pygame

logger = logging.getLogger(__name__)


class Window:
    """
    Owns the pygame display and the ModernGL context drawing into it.
    Use create_window() to open one.
    """

    def __init__(self, ctx: moderngl.Context):
        self.ctx = ctx

    def poll_events(self) -> list[pygame.event.Event]:
        events = pygame.event.get()

        # HACK: display.get_size() doesn't report back correct screen size
        # after a resize, the event does
        for event in events:
            if event.type == pygame.VIDEORESIZE:
                self.ctx.viewport = (0, 0, event.w, event.h)

        return events

    def clear_and_present(self, color: pygame.Color):
        # OpenGL bypasses Pygame, so the clear color goes to the ModernGL
        # context normalized to 0-1
        self.ctx.clear(color.r / 255, color.g / 255, color.b / 255,
                       color.a / 255)

        # Switch to back buffer
        pygame.display.flip()

    def close(self):
        self.ctx.release()
        pygame.quit()


def create_window(title: str, width: int, height: int,
                  fullscreen: bool = False) -> Window:
    """
    Open a centered, resizable OpenGL window.

    Fullscreen takes over the desktop at its current resolution.
    pygame.error and moderngl.Error are raised as-is if the video system
    or the window can't be set up.
    """
    pygame.init()

    try:
        # Enable forward compat; request context
        # https://stackoverflow.com/questions/76151435/creating-a-context-utilizing-moderngl-for-pygame
        pygame.display.gl_set_attribute(pygame.GL_CONTEXT_MAJOR_VERSION, 3)
        pygame.display.gl_set_attribute(pygame.GL_CONTEXT_MINOR_VERSION, 3)
        pygame.display.gl_set_attribute(
            pygame.GL_CONTEXT_PROFILE_MASK, pygame.GL_CONTEXT_PROFILE_CORE)
        pygame.display.gl_set_attribute(
            pygame.GL_CONTEXT_FORWARD_COMPATIBLE_FLAG, True)

        os.environ.setdefault("SDL_VIDEO_CENTERED", "1")

        flags = pygame.OPENGL | pygame.DOUBLEBUF | pygame.RESIZABLE
        size = (width, height)
        if fullscreen:
            flags |= pygame.FULLSCREEN
            size = (0, 0)  # Desktop resolution

        pygame.display.set_mode(size, flags)
        pygame.display.set_caption(title)

        ctx = moderngl.create_context()
    except (pygame.error, moderngl.Error):
        pygame.quit()
        raise

    logger.debug("OpenGL context %s", ctx.info.get("GL_VERSION"))
    return Window(ctx)
