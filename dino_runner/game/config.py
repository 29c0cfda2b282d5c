# dino_runner/game/config.py
from __future__ import annotations
from dataclasses import dataclass, asdict, replace, fields
from typing import Any, Dict, Mapping, Optional

# --- Display ---
WIDTH = 900
HEIGHT = 300
FPS = 60
CAPTION = "Dino Runner"

# --- Player ---
PLAYER_X = 80               # player's fixed x (world scrolls left)
PLAYER_W = 42
PLAYER_H = 46
GROUND_Y = 210              # player's top y when standing on the ground

# --- Obstacles ---
OBSTACLE_H_MIN = 28
OBSTACLE_H_SPREAD = 28      # height = MIN + U(0, SPREAD)
OBSTACLE_W_MIN = 18
OBSTACLE_W_SPREAD = 20
OBSTACLE_GAP_SPREAD = 180   # gap = spacing + U(0, SPREAD)
OBSTACLE_FALLBACK_X = 900   # tail x used when the sequence is empty
OBSTACLES_AT_RESET = 2

# --- Background ---
CLOUD_COUNT = 4
CLOUD_PX_PER_MS = 0.02

# --- Persistence ---
BEST_SCORE_KEY = "dino-runner-best"
BEST_SCORE_FILE = "~/.dino_runner.json"

# --- Colors (RGB) ---
COLOR_BG = (246, 248, 252)
COLOR_GROUND = (199, 209, 230)
COLOR_CLOUD = (223, 230, 243)
COLOR_PLAYER = (28, 35, 51)
COLOR_EYE = (255, 255, 255)
COLOR_OBSTACLE = (59, 143, 59)
COLOR_FG = (28, 35, 51)
COLOR_PANEL = (255, 255, 255)
COLOR_BUTTON = (40, 60, 90)
COLOR_BUTTON_FG = (220, 235, 255)


@dataclass(frozen=True)
class RunnerConfig:
    """
    Physics and progression constants of one engine preset.
    Per-tick values (gravity, jump_velocity, base_speed) are in px/tick,
    score_rate is points per millisecond.
    """
    gravity: float = 0.55
    jump_velocity: float = -14.5
    obstacle_spacing: float = 260.0
    base_speed: float = 4.0
    collision_inset: float = 6.0
    score_rate: float = 0.018
    speed_acceleration: float = 0.0035
    max_delta_ms: Optional[float] = None  # None = no cap on elapsed time per tick

    @classmethod
    def options(cls) -> tuple:
        return tuple(f.name for f in fields(cls))

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any], base: Optional["RunnerConfig"] = None) -> "RunnerConfig":
        """Build a config from `base` (default preset if omitted) with `values` overridden."""
        unknown = sorted(set(values) - set(cls.options()))
        if unknown:
            raise ValueError(
                f"Unrecognized config option(s): {', '.join(unknown)}. "
                f"Recognized: {', '.join(cls.options())}"
            )
        return replace(base if base is not None else cls(), **dict(values))

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


PRESETS: Dict[str, RunnerConfig] = {
    # forgiving hit box, floaty jump
    "classic": RunnerConfig(),
    # heavier, faster, exact hit box
    "sharp": RunnerConfig(
        gravity=0.7,
        jump_velocity=-15.5,
        obstacle_spacing=240.0,
        base_speed=5.0,
        collision_inset=0.0,
    ),
}
DEFAULT_PRESET = "classic"


def get_preset(name: str) -> RunnerConfig:
    try:
        return PRESETS[name]
    except KeyError:
        raise ValueError(f"Unknown preset {name!r}. Available: {', '.join(sorted(PRESETS))}") from None
