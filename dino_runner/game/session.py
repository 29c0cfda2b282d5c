# dino_runner/game/session.py
from __future__ import annotations
import math
import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional

from .config import RunnerConfig, PRESETS, DEFAULT_PRESET
from .player import Player
from .level import ObstacleCourse, Obstacle
from .collision import player_hits_any
from .storage import BestScore, MemoryStore, Store

IDLE_TITLE = "Dino Runner"
IDLE_MESSAGE = "Press Space or tap to start."
IDLE_BUTTON = "Start"
OVER_TITLE = "Game Over"
OVER_MESSAGE = "Press Space or tap to try again."
OVER_BUTTON = "Restart"


class GameState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    ENDED = "ended"


@dataclass
class RunState:
    score: float = 0.0
    speed: float = 0.0
    last_time: float = 0.0   # ms timestamp of the previous tick


@dataclass
class Overlay:
    visible: bool = True
    title: str = IDLE_TITLE
    message: str = IDLE_MESSAGE
    button: str = IDLE_BUTTON


class Hud:
    """Display slots the session pushes into. Hosts read these each frame."""
    def __init__(self):
        self.score_text = "0"
        self.best_text = "0"
        self.overlay = Overlay()

    def show_score(self, text: str):
        self.score_text = text

    def show_best(self, text: str):
        self.best_text = text

    def show_overlay(self, title: str, message: str, button: str):
        self.overlay = Overlay(visible=True, title=title, message=message, button=button)

    def hide_overlay(self):
        self.overlay.visible = False


def _perf_ms() -> float:
    return time.perf_counter() * 1000.0


class GameSession:
    """
    One player, one obstacle course, one best score.
    All commands (start / jump / reset_best) and the per-frame tick go through here;
    the host only supplies timestamps, input and a renderer.

    renderer(session, delta_ms) is called after every simulation step, before the
    collision test, so the frame that ends a round is still drawn.
    """
    def __init__(self,
                 config: Optional[RunnerConfig] = None,
                 store: Optional[Store] = None,
                 seed: Optional[int] = None,
                 clock: Optional[Callable[[], float]] = None,
                 renderer: Optional[Callable[["GameSession", float], None]] = None,
                 hud: Optional[Hud] = None):
        self.config = config if config is not None else PRESETS[DEFAULT_PRESET]
        self.clock = clock if clock is not None else _perf_ms
        self.renderer = renderer
        self.hud = hud if hud is not None else Hud()

        self.player = Player()
        self.course = ObstacleCourse(self.config.obstacle_spacing, seed)
        self.best = BestScore(store if store is not None else MemoryStore())
        self.run = RunState(speed=self.config.base_speed)
        self.state = GameState.IDLE
        self.ticks = 0

        self.hud.show_best(str(self.best.value))
        self.reset_game()

    # -------------------- Views --------------------

    @property
    def running(self) -> bool:
        return self.state is GameState.RUNNING

    @property
    def score(self) -> float:
        return self.run.score

    @property
    def speed(self) -> float:
        return self.run.speed

    @property
    def obstacles(self) -> List[Obstacle]:
        return self.course.obstacles

    @property
    def seed(self) -> int:
        return self.course.seed

    # -------------------- Simulation --------------------

    def reset_game(self):
        self.run.score = 0.0
        self.run.speed = self.config.base_speed
        self.player.reset()
        self.ticks = 0
        self.push_score()
        self.course.reset()

    def push_score(self):
        self.hud.show_score(str(math.floor(self.run.score)))

    def update(self, delta: float):
        """
        Advance one tick. Gravity, jump arc and scrolling move a fixed amount per tick;
        only the score is scaled by the elapsed milliseconds.
        """
        cfg = self.config
        self.player.update_physics(cfg.gravity)
        self.course.update(self.run.speed)

        if cfg.max_delta_ms is not None:
            delta = min(delta, cfg.max_delta_ms)
        self.run.score += max(0.0, delta) * cfg.score_rate
        self.run.speed = cfg.base_speed + self.run.score * cfg.speed_acceleration
        self.ticks += 1

    def check_collisions(self) -> bool:
        return player_hits_any(self.player, self.course.obstacles, self.config.collision_inset)

    # -------------------- Commands --------------------

    def start(self) -> bool:
        """Begin a fresh round. Returns False (and changes nothing) if one is running."""
        if self.running:
            return False
        self.reset_game()
        self.hud.hide_overlay()
        self.state = GameState.RUNNING
        self.run.last_time = self.clock()
        return True

    def jump(self) -> bool:
        if not self.running:
            return self.start()
        return self.player.try_jump(self.config.jump_velocity)

    def reset_best(self):
        self.best.reset()
        self.hud.show_best("0")

    def end_round(self):
        self.state = GameState.ENDED
        self.hud.show_overlay(OVER_TITLE, OVER_MESSAGE, OVER_BUTTON)
        if self.best.submit(self.run.score):
            self.hud.show_best(str(self.best.value))

    def tick(self, timestamp: Optional[float] = None) -> bool:
        """
        One frame. Returns True while the round goes on, i.e. when the host should
        schedule another tick.
        """
        if not self.running:
            return False
        if timestamp is None:
            timestamp = self.clock()
        delta = timestamp - self.run.last_time
        self.run.last_time = timestamp

        self.update(delta)
        if self.renderer is not None:
            self.renderer(self, delta)
        self.push_score()

        if self.check_collisions():
            self.end_round()
            return False
        return True
