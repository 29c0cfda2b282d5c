# dino_runner/env/observations.py
from __future__ import annotations
from typing import Tuple
import numpy as np

from dino_runner.game.config import (
    WIDTH, GROUND_Y,
    OBSTACLE_W_MIN, OBSTACLE_W_SPREAD, OBSTACLE_H_MIN, OBSTACLE_H_SPREAD,
)

LOOKAHEAD = 2          # obstacles described ahead of the player
SPEED_NORM_MAX = 16.0  # speeds above this read as 1.0
OBS_SIZE = 4 + 3 * LOOKAHEAD

OBS_LOW: Tuple[float, ...] = (0.0, -1.0, 0.0, 0.0) + (0.0, 0.0, 0.0) * LOOKAHEAD
OBS_HIGH: Tuple[float, ...] = (1.0, 1.0, 1.0, 1.0) + (1.0, 1.0, 1.0) * LOOKAHEAD


def _clamp01(x: float) -> float:
    return 0.0 if x < 0.0 else (1.0 if x > 1.0 else x)


def build_observation(session) -> np.ndarray:
    """
    Vector view of a GameSession, shape (OBS_SIZE,), float32:

      [height_above_ground, vy, airborne, speed,
       dist_1, width_1, height_1,
       dist_2, width_2, height_2]

    - height_above_ground: 0 on the ground, 1 at GROUND_Y px up
    - vy: velocity / |jump_velocity|, so -1 is the take-off speed
    - dist_k: gap between player's right edge and obstacle k's left edge, / WIDTH
      (0 when already overlapping in x, 1 when absent or out of range)
    - width_k / height_k: size over the generator's maximum (0 when absent)
    """
    player = session.player
    cfg = session.config

    height = _clamp01((player.ground_y - player.y) / max(1.0, GROUND_Y))
    vmax = max(1e-6, abs(cfg.jump_velocity))
    vy = max(-1.0, min(1.0, player.vy / vmax))
    airborne = 1.0 if player.airborne else 0.0
    speed = _clamp01(session.speed / SPEED_NORM_MAX)

    obs = [height, vy, airborne, speed]
    ahead = session.course.ahead_of(player.x, LOOKAHEAD)
    for i in range(LOOKAHEAD):
        if i < len(ahead):
            o = ahead[i]
            dist = _clamp01((o.x - (player.x + player.width)) / WIDTH)
            w = _clamp01(o.width / (OBSTACLE_W_MIN + OBSTACLE_W_SPREAD))
            h = _clamp01(o.height / (OBSTACLE_H_MIN + OBSTACLE_H_SPREAD))
            obs.extend([dist, w, h])
        else:
            obs.extend([1.0, 0.0, 0.0])

    return np.asarray(obs, dtype=np.float32)
