# dino_runner/game/player.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple
from .config import PLAYER_X, PLAYER_W, PLAYER_H, GROUND_Y


@dataclass
class Player:
    """
    Runner with a fixed x and a single jump:
    - y is the TOP of the box; larger y is lower on screen
    - airborne stays True from the jump until y is back on the ground
    """
    x: float = float(PLAYER_X)
    y: float = float(GROUND_Y)
    vy: float = 0.0
    airborne: bool = False
    width: int = PLAYER_W
    height: int = PLAYER_H
    ground_y: float = float(GROUND_Y)

    def box(self, inset: float = 0.0) -> Tuple[float, float, float, float]:
        """(left, top, right, bottom) shrunk by `inset` on every side."""
        return (
            self.x + inset,
            self.y + inset,
            self.x + self.width - inset,
            self.y + self.height - inset,
        )

    def reset(self):
        self.y = self.ground_y
        self.vy = 0.0
        self.airborne = False

    def can_jump(self) -> bool:
        return not self.airborne

    def try_jump(self, jump_velocity: float) -> bool:
        """Jump only from the ground. Returns True if performed."""
        if self.can_jump():
            self.vy = jump_velocity
            self.airborne = True
            return True
        return False

    def update_physics(self, gravity: float):
        """One tick of integration. Increments are per tick, not per ms."""
        self.vy += gravity
        self.y += self.vy

        # Landing
        if self.y >= self.ground_y:
            self.y = self.ground_y
            self.vy = 0.0
            self.airborne = False
