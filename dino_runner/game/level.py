# dino_runner/game/level.py
from __future__ import annotations
import random
from dataclasses import dataclass
from typing import List, Optional
from .config import (
    GROUND_Y, PLAYER_H,
    OBSTACLE_H_MIN, OBSTACLE_H_SPREAD, OBSTACLE_W_MIN, OBSTACLE_W_SPREAD,
    OBSTACLE_GAP_SPREAD, OBSTACLE_FALLBACK_X, OBSTACLES_AT_RESET,
)


@dataclass
class Obstacle:
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height


class ObstacleCourse:
    """
    Endless row of ground obstacles scrolling left.
    Obstacles are appended with strictly increasing x, so list order == spatial order
    and the head (index 0) is always the leftmost one.
    """
    def __init__(self, spacing: float, seed: Optional[int] = None):
        if seed is None:
            seed = random.randrange(0, 2**32 - 1)
        self.seed = seed
        self.rng = random.Random(seed)
        self.spacing = float(spacing)
        self.obstacles: List[Obstacle] = []

    def __len__(self) -> int:
        return len(self.obstacles)

    def clear(self):
        self.obstacles = []

    def reset(self):
        """Empty the course and pre-spawn the first screen."""
        self.clear()
        for _ in range(OBSTACLES_AT_RESET):
            self.spawn_obstacle()

    def spawn_obstacle(self) -> Obstacle:
        height = OBSTACLE_H_MIN + self.rng.random() * OBSTACLE_H_SPREAD
        width = OBSTACLE_W_MIN + self.rng.random() * OBSTACLE_W_SPREAD
        gap = self.spacing + self.rng.random() * OBSTACLE_GAP_SPREAD
        last_x = self.obstacles[-1].x if self.obstacles else OBSTACLE_FALLBACK_X
        obstacle = Obstacle(
            x=last_x + gap,
            y=GROUND_Y + PLAYER_H - height,   # bottom sits on the ground line
            width=width,
            height=height,
        )
        self.obstacles.append(obstacle)
        return obstacle

    def scroll(self, speed: float):
        for obstacle in self.obstacles:
            obstacle.x -= speed

    def recycle(self) -> bool:
        """Drop the head once fully off screen and spawn its replacement."""
        if self.obstacles and self.obstacles[0].right < 0:
            self.obstacles.pop(0)
            self.spawn_obstacle()
            return True
        return False

    def update(self, speed: float) -> bool:
        self.scroll(speed)
        return self.recycle()

    def ahead_of(self, x: float, count: int) -> List[Obstacle]:
        """First `count` obstacles whose right edge is still past `x`."""
        return [o for o in self.obstacles if o.right > x][:count]
