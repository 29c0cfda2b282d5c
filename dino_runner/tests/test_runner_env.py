# dino_runner/tests/test_runner_env.py
"""
Quick tests for RunnerEnv (Gymnasium environment) and its observation vector.

Usage (from repo root):
  python -m pytest dino_runner/tests/test_runner_env.py
  python -m dino_runner.tests.test_runner_env
"""
from __future__ import annotations
from typing import List, Tuple

import numpy as np
from gymnasium.utils.env_checker import check_env

from dino_runner.env.observations import build_observation, OBS_SIZE
from dino_runner.env.runner_env import RunnerEnv
from dino_runner.game.config import WIDTH, HEIGHT, GROUND_Y, PLAYER_H, PRESETS
from dino_runner.game.level import Obstacle
from dino_runner.game.session import GameSession
from dino_runner.game.storage import MemoryStore


def test_api_check():
    """Verify Gym API contract (spaces, step/reset signatures, types)."""
    env = RunnerEnv()
    try:
        check_env(env, skip_render_check=True)
    finally:
        env.close()


def test_smoke_random_rollout():
    env = RunnerEnv(frame_skip=4)
    try:
        obs, info = env.reset(seed=123)
        assert env.observation_space.contains(obs), "Initial observation not in space"
        assert info["seed"] == 123
        rng = np.random.RandomState(0)
        for t in range(500):
            obs, r, term, trunc, info = env.step(int(rng.randint(0, 2)))
            assert isinstance(r, float), "Reward must be a float"
            assert env.observation_space.contains(obs), f"Step {t}: observation out of bounds"
            if term or trunc:
                break
    finally:
        env.close()


def test_noop_policy_eventually_crashes():
    env = RunnerEnv(frame_skip=4)
    try:
        env.reset(seed=7)
        total = 0.0
        for _ in range(1000):
            _, r, term, _, info = env.step(0)
            total += r
            if term:
                break
        assert term, "standing still should hit the first obstacle"
        assert r == -1.0
        assert info["best"] == int(info["score"])
        assert total > 0
    finally:
        env.close()


def test_determinism():
    """Same seed + same action sequence => identical obs/reward/terminal flags."""
    def rollout(seed_val: int, action_seq: List[int]) -> List[Tuple[np.ndarray, float, bool, bool]]:
        env = RunnerEnv(frame_skip=4)
        traj = []
        try:
            env.reset(seed=seed_val)
            for a in action_seq:
                obs, r, term, trunc, _ = env.step(int(a))
                traj.append((obs.copy(), float(r), bool(term), bool(trunc)))
                if term or trunc:
                    break
        finally:
            env.close()
        return traj

    rng = np.random.RandomState(42)
    actions = [int(rng.randint(0, 2)) for _ in range(300)]
    t1 = rollout(2024, actions)
    t2 = rollout(2024, actions)
    assert len(t1) == len(t2)
    for i, ((o1, r1, te1, tr1), (o2, r2, te2, tr2)) in enumerate(zip(t1, t2)):
        assert np.array_equal(o1, o2), f"obs mismatch at step {i}"
        assert (r1, te1, tr1) == (r2, te2, tr2), f"transition mismatch at step {i}"


def test_time_limit_truncates():
    env = RunnerEnv(frame_skip=1, time_limit_seconds=0.05)  # 3 decisions
    try:
        env.reset(seed=1)
        flags = [env.step(0)[3] for _ in range(3)]
        assert flags == [False, False, True]
    finally:
        env.close()


def test_best_score_carries_across_episodes():
    store = MemoryStore()
    env = RunnerEnv(store=store)
    try:
        env.reset(seed=3)
        for _ in range(30):  # ~2 s of running, course still far away
            assert not env.step(0)[2]
        env.session.course.obstacles[0] = Obstacle(x=100, y=190, width=20, height=40)
        _, _, term, _, info = env.step(0)
        assert term
        first_best = info["best"]
        assert first_best > 0

        env.reset(seed=4)
        assert env.session.best.value == first_best
    finally:
        env.close()


def test_rgb_array_render():
    env = RunnerEnv(render_mode="rgb_array", config=PRESETS["sharp"])
    try:
        env.reset(seed=5)
        env.step(1)
        frame = env.render()
        assert isinstance(frame, np.ndarray)
        assert frame.shape == (HEIGHT, WIDTH, 3) and frame.dtype == np.uint8
    finally:
        env.close()


def test_observation_layout():
    session = GameSession(store=MemoryStore(), seed=9)
    obs = build_observation(session)
    assert obs.dtype == np.float32 and obs.shape == (OBS_SIZE,)
    # standing, still, slow; first obstacles are past the lookahead range
    assert obs[0] == 0.0 and obs[1] == 0.0 and obs[2] == 0.0
    assert np.isclose(obs[3], 4.0 / 16.0)
    assert obs[4] == 1.0

    h = 28.0
    session.course.obstacles = [Obstacle(x=212.0, y=GROUND_Y + PLAYER_H - h, width=19.0, height=h)]
    session.player.try_jump(session.config.jump_velocity)
    obs = build_observation(session)
    assert obs[1] == -1.0 and obs[2] == 1.0
    assert np.allclose(obs[4:7], [0.1, 0.5, 0.5])
    assert np.allclose(obs[7:10], [1.0, 0.0, 0.0])


def main():
    tests = [(name, fn) for name, fn in sorted(globals().items()) if name.startswith("test_") and callable(fn)]
    for name, fn in tests:
        fn()
        print(f"✓ {name}")
    print("🎉 All env tests passed")


if __name__ == "__main__":
    main()
