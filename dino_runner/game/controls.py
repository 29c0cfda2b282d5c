# dino_runner/game/controls.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional

import pygame

from .config import WIDTH, HEIGHT

JUMP_KEYS = (pygame.K_SPACE, pygame.K_UP)


class Command(Enum):
    JUMP = "jump"
    START = "start"
    RESET_BEST = "reset_best"
    QUIT = "quit"


@dataclass
class Buttons:
    """Clickable UI areas in window coordinates."""
    start: pygame.Rect
    reset_best: pygame.Rect

    @classmethod
    def default(cls, width: int = WIDTH, height: int = HEIGHT) -> "Buttons":
        btn_w, btn_h = 160, 40
        start = pygame.Rect((width - btn_w) // 2, height // 2 + 10, btn_w, btn_h)
        reset = pygame.Rect(width - 130, 8, 120, 28)
        return cls(start=start, reset_best=reset)


def command_for_event(event, buttons: Buttons, overlay_visible: bool) -> Optional[Command]:
    """
    Map one pygame event to a game command (or None).
    A left click that misses every button counts as a jump, which is also how a click
    on the overlay background restarts the game.
    """
    if event.type == pygame.QUIT:
        return Command.QUIT
    if event.type == pygame.KEYDOWN:
        if event.key == pygame.K_ESCAPE:
            return Command.QUIT
        if event.key in JUMP_KEYS:
            return Command.JUMP
        return None
    if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
        if buttons.reset_best.collidepoint(event.pos):
            return Command.RESET_BEST
        if overlay_visible and buttons.start.collidepoint(event.pos):
            return Command.START
        return Command.JUMP
    return None


def apply_command(session, command: Optional[Command]) -> bool:
    """Run `command` on the session. Returns False when the host should quit."""
    if command is Command.QUIT:
        return False
    if command is Command.JUMP:
        session.jump()
    elif command is Command.START:
        session.start()
    elif command is Command.RESET_BEST:
        session.reset_best()
    return True
