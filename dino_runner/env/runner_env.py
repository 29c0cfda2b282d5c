# dino_runner/env/runner_env.py
from __future__ import annotations
from typing import Optional, Dict, Any
import numpy as np
import gymnasium as gym
import pygame

from dino_runner.game.config import WIDTH, HEIGHT, CAPTION, RunnerConfig, PRESETS, DEFAULT_PRESET
from dino_runner.game.render import PygameSurface, SceneRenderer
from dino_runner.game.session import GameSession
from dino_runner.game.storage import MemoryStore, Store
from dino_runner.env.observations import build_observation, OBS_LOW, OBS_HIGH


class RunnerEnv(gym.Env):
    """
    Dino Runner Gymnasium environment (vector observations).
    - Simulation at 60 Hz on a virtual clock (frame_ms per tick).
    - Agent acts every `frame_skip` frames (default 4) -> 15 decisions/sec.
    - Actions: 0 = NOOP, 1 = JUMP. Observation: shape (10,), float32.
    """
    metadata = {"render_modes": ["human", "rgb_array"], "render_fps": 60}

    def __init__(self,
                 render_mode: Optional[str] = None,
                 frame_skip: int = 4,
                 time_limit_seconds: Optional[float] = 60.0,
                 config: Optional[RunnerConfig] = None,
                 store: Optional[Store] = None):
        super().__init__()
        assert frame_skip >= 1, "frame_skip must be >= 1"
        self.render_mode = render_mode
        self.frame_skip = int(frame_skip)
        self.config = config if config is not None else PRESETS[DEFAULT_PRESET]
        self.store = store if store is not None else MemoryStore()

        # Internal sim timing
        self.sim_fps = 60
        self.frame_ms = 1000.0 / self.sim_fps

        self.time_limit_decisions = None
        if time_limit_seconds is not None:
            self.time_limit_decisions = int(self.sim_fps * time_limit_seconds / self.frame_skip)

        # --- Gym spaces ---
        self.action_space = gym.spaces.Discrete(2)
        self.observation_space = gym.spaces.Box(
            low=np.array(OBS_LOW, dtype=np.float32),
            high=np.array(OBS_HIGH, dtype=np.float32),
            dtype=np.float32,
        )

        # --- Runtime state ---
        self.session: Optional[GameSession] = None
        self.now_ms: float = 0.0
        self.timestep: int = 0
        self.current_seed: Optional[int] = None

        # Rendering
        self.screen = None
        self.clock = None
        self.scene: Optional[SceneRenderer] = None

    # -------------------- Core API --------------------

    def reset(self, *, seed: Optional[int] = None, options: Optional[Dict[str, Any]] = None):
        super().reset(seed=seed)  # initializes self.np_random

        # With a seed: exact course reproduction. Without: draw one from np_random.
        course_seed = int(seed) if seed is not None else int(self.np_random.integers(0, 2**31 - 1))

        self.now_ms = 0.0
        self.session = GameSession(config=self.config, store=self.store, seed=course_seed,
                                   clock=lambda: self.now_ms)
        if self.render_mode is not None:
            self._ensure_screen()
            self.session.renderer = self.scene
        self.session.start()

        self.timestep = 0
        self.current_seed = self.session.seed

        obs = self._get_obs()
        info = {"seed": self.current_seed, "score": self.session.score}
        return obs, info

    def step(self, action: int):
        assert self.action_space.contains(action), f"Invalid action {action}"
        assert self.session is not None

        session = self.session
        jumped = False
        if action == 1 and session.running:
            jumped = session.jump()

        for _ in range(self.frame_skip):
            self.now_ms += self.frame_ms
            if not session.tick(self.now_ms):
                break

        reward = 1.0 if session.running else -1.0

        self.timestep += 1
        terminated = not session.running
        truncated = False
        if (self.time_limit_decisions is not None) and (self.timestep >= self.time_limit_decisions):
            truncated = True

        obs = self._get_obs()
        info = {
            "score": session.score,
            "best": session.best.value,
            "speed": session.speed,
            "timestep": self.timestep,
            "seed": self.current_seed,
            "jumped": jumped,
        }

        if self.render_mode == "human":
            self.render()

        return obs, reward, terminated, truncated, info

    # -------------------- Helpers --------------------

    def _get_obs(self) -> np.ndarray:
        assert self.session is not None
        return build_observation(self.session)

    def _ensure_screen(self):
        if self.screen is not None:
            return
        pygame.init()
        if self.render_mode == "human":
            self.screen = pygame.display.set_mode((WIDTH, HEIGHT))
            pygame.display.set_caption(f"{CAPTION} - Gym Env")
            self.clock = pygame.time.Clock()
        else:
            self.screen = pygame.Surface((WIDTH, HEIGHT))
        self.scene = SceneRenderer(PygameSurface(self.screen))

    # -------------------- Rendering --------------------

    def render(self):
        if self.render_mode is None or self.session is None:
            return None

        self._ensure_screen()
        self.scene.draw(self.session, 0.0)

        if self.render_mode == "human":
            # Pump the event queue so the OS doesn't think we're hung
            pygame.event.pump()
            pygame.display.flip()
            if self.clock is not None:
                self.clock.tick(self.metadata.get("render_fps", 60))
            return None

        # rgb_array: (H, W, 3) uint8
        arr = pygame.surfarray.array3d(self.screen)  # (W, H, 3)
        return np.transpose(arr, (1, 0, 2))

    def close(self):
        if self.screen is not None:
            if self.render_mode == "human":
                pygame.display.quit()
            pygame.quit()
            self.screen = None
            self.clock = None
            self.scene = None
