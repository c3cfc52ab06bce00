"""Interactive window that shows a fractal view and reacts to keys and scrolling."""

from __future__ import annotations

from typing import Optional

import numpy as np
import pygame

from fractol.view import HEIGHT, WIDTH, View

_PAN_KEYS = {
    pygame.K_UP: (0, -1),
    pygame.K_DOWN: (0, 1),
    pygame.K_LEFT: (-1, 0),
    pygame.K_RIGHT: (1, 0),
}


def handle_event(view: View, event: pygame.event.Event) -> bool:
    """Apply *event* to *view*; return False when the window should close.

    Escape and closing the window end the session.  Scrolling zooms every
    fractal.  Only navigable views answer to the arrow keys, which pan, and
    to the keys 1 and 2, which raise and lower the colour intensity.
    """
    if event.type == pygame.QUIT:
        return False
    if event.type == pygame.MOUSEWHEEL:
        view.zoom(event.y)
        return True
    if event.type != pygame.KEYDOWN:
        return True
    key = event.key
    if key == pygame.K_ESCAPE:
        return False
    if not view.kind.navigable:
        return True
    if key == pygame.K_1:
        view.brighten()
    elif key == pygame.K_2:
        view.dim()
    elif key in _PAN_KEYS:
        view.pan(*_PAN_KEYS[key])
    return True


def _surface(view: View, width: int, height: int) -> pygame.Surface:
    pixels = view.render(width, height)
    # Pixels carry alpha; composite them over the black window background.
    rgb = pixels[..., :3].astype(np.uint16) * pixels[..., 3:4] // 255
    data = np.ascontiguousarray(rgb.astype(np.uint8)).tobytes()
    return pygame.image.frombuffer(data, (width, height), "RGB").copy()


def run(view: View, title: Optional[str] = None) -> None:
    """Open a window showing *view* and run until it is closed."""
    pygame.init()
    try:
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption(title or view.kind.title)
        shown = None
        running = True
        while running:
            state = (view.viewport, view.intensity)
            if state != shown:
                screen.blit(_surface(view, WIDTH, HEIGHT), (0, 0))
                pygame.display.flip()
                shown = state
            running = handle_event(view, pygame.event.wait())
    finally:
        pygame.quit()