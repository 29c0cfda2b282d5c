# dino_runner/game/collision.py
"""
Axis-aligned overlap tests between the player and obstacles.
Boxes are (left, top, right, bottom) float tuples.
"""
from __future__ import annotations
from typing import Iterable, Tuple

Box = Tuple[float, float, float, float]  # left, top, right, bottom


def boxes_overlap(a: Box, b: Box) -> bool:
    """Strict overlap: touching edges do not count."""
    a_left, a_top, a_right, a_bottom = a
    b_left, b_top, b_right, b_bottom = b
    hit_x = a_left < b_right and a_right > b_left
    hit_y = a_top < b_bottom and a_bottom > b_top
    return hit_x and hit_y


def player_hits_any(player, obstacles: Iterable, inset: float = 0.0) -> bool:
    """True if the player's (inset) box overlaps any obstacle box."""
    me = player.box(inset)
    return any(
        boxes_overlap(me, (o.x, o.y, o.right, o.bottom))
        for o in obstacles
    )
