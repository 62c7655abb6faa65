"""Arc, marker and label renderer."""
from __future__ import annotations

import pygame

from sunarc import ArcCoordinate, PositionMapper

from ui.constants import ARC_H, MARGIN_X, MARGIN_Y, MARKER_SIZE, TRAIL


def _to_screen(point: ArcCoordinate) -> tuple[int, int]:
    return int(MARGIN_X + point.x), int(MARGIN_Y + point.y)


def draw_arc(
    surface: pygame.Surface,
    mapper: PositionMapper,
    ink: tuple[int, int, int],
) -> None:
    """Draw the dotted arc path and the horizon line."""
    half = MARKER_SIZE // 2
    for i in range(0, 101, 2):
        x, y = _to_screen(mapper.locate(i / 100))
        surface.set_at((x + half, y + half), TRAIL)

    horizon_y = MARGIN_Y + ARC_H + half
    pygame.draw.line(
        surface, ink, (0, horizon_y), (surface.get_width(), horizon_y)
    )


def draw_marker(
    surface: pygame.Surface,
    position: ArcCoordinate,
    alpha: float,
    moon_visible: bool,
    ink: tuple[int, int, int],
    background: tuple[int, int, int],
) -> None:
    """Draw the sun; the moon is the sun with its right half masked."""
    if alpha <= 0:
        return
    x, y = _to_screen(position)
    half = MARKER_SIZE // 2
    pygame.draw.circle(surface, ink, (x + half, y + half), half)
    if moon_visible:
        pygame.draw.rect(surface, background, (x + half, y, half, MARKER_SIZE))


def draw_time_label(
    surface: pygame.Surface,
    font: pygame.font.Font,
    position: ArcCoordinate,
    text: str,
    ink: tuple[int, int, int],
) -> None:
    x, y = _to_screen(position)
    label = font.render(text, True, ink)
    surface.blit(label, (x - 10, y - 24))
