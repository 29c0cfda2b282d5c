# dino_runner/game/render.py
from __future__ import annotations
import math
from dataclasses import dataclass
from typing import List, Protocol, Tuple

import pygame

from .config import (
    WIDTH, GROUND_Y, PLAYER_H, CLOUD_COUNT, CLOUD_PX_PER_MS,
    COLOR_BG, COLOR_GROUND, COLOR_CLOUD, COLOR_PLAYER, COLOR_EYE, COLOR_OBSTACLE,
)

Color = Tuple[int, int, int]
Point = Tuple[float, float]


class RenderSurface(Protocol):
    width: int
    height: int

    def clear(self) -> None: ...
    def fill_rect(self, color: Color, x: float, y: float, w: float, h: float) -> None: ...
    def fill_ellipse(self, color: Color, cx: float, cy: float, rx: float, ry: float) -> None: ...
    def stroke_line(self, color: Color, start: Point, end: Point, width: int = 1) -> None: ...


class PygameSurface:
    """RenderSurface over a pygame.Surface (the window or an offscreen buffer)."""
    def __init__(self, surf: pygame.Surface, background: Color = COLOR_BG):
        self.surf = surf
        self.background = background

    @property
    def width(self) -> int:
        return self.surf.get_width()

    @property
    def height(self) -> int:
        return self.surf.get_height()

    def clear(self):
        self.surf.fill(self.background)

    def fill_rect(self, color, x, y, w, h):
        pygame.draw.rect(self.surf, color, pygame.Rect(int(x), int(y), int(math.ceil(w)), int(math.ceil(h))))

    def fill_ellipse(self, color, cx, cy, rx, ry):
        bounds = pygame.Rect(int(cx - rx), int(cy - ry), int(2 * rx), int(2 * ry))
        pygame.draw.ellipse(self.surf, color, bounds)

    def stroke_line(self, color, start, end, width=1):
        pygame.draw.line(self.surf, color, start, end, width)


@dataclass
class Cloud:
    x: float
    y: float
    size: float


class CloudLayer:
    """Background decoration drifting left in real time (px per ms), wrapping at the right edge."""
    def __init__(self, width: int = WIDTH, count: int = CLOUD_COUNT):
        self.width = width
        self.clouds: List[Cloud] = [
            Cloud(x=150 + i * 220, y=40 + i * 18, size=24 + i * 3) for i in range(count)
        ]

    def advance(self, delta: float):
        for cloud in self.clouds:
            cloud.x -= delta * CLOUD_PX_PER_MS
            if cloud.x + cloud.size < 0:
                cloud.x = self.width + cloud.size * 2

    def draw(self, surface: RenderSurface):
        for cloud in self.clouds:
            surface.fill_ellipse(COLOR_CLOUD, cloud.x, cloud.y, cloud.size, cloud.size * 0.6)


def draw_ground(surface: RenderSurface):
    y = GROUND_Y + PLAYER_H + 2
    surface.stroke_line(COLOR_GROUND, (0, y), (surface.width, y), 2)


def draw_player(surface: RenderSurface, player):
    body_x = player.x
    body_y = player.y + 10
    body_w = player.width
    body_h = player.height - 10
    head_w, head_h = 26, 18
    head_x = body_x + body_w - head_w + 4
    head_y = player.y

    surface.fill_rect(COLOR_PLAYER, body_x, body_y, body_w, body_h)
    surface.fill_rect(COLOR_PLAYER, head_x, head_y, head_w, head_h)
    surface.fill_rect(COLOR_EYE, head_x + 16, head_y + 6, 4, 4)
    # feet
    surface.fill_rect(COLOR_PLAYER, body_x + 6, body_y + body_h - 6, 6, 6)
    surface.fill_rect(COLOR_PLAYER, body_x + 20, body_y + body_h - 6, 6, 6)


def draw_obstacles(surface: RenderSurface, obstacles):
    for o in obstacles:
        surface.fill_rect(COLOR_OBSTACLE, o.x, o.y, o.width, o.height)


class SceneRenderer:
    """Per-tick scene drawer; plug into GameSession(renderer=...)."""
    def __init__(self, surface: RenderSurface):
        self.surface = surface
        self.clouds = CloudLayer(width=surface.width)

    def draw(self, session, delta: float = 0.0):
        self.surface.clear()
        self.clouds.advance(delta)
        self.clouds.draw(self.surface)
        draw_ground(self.surface)
        draw_obstacles(self.surface, session.obstacles)
        draw_player(self.surface, session.player)

    __call__ = draw
