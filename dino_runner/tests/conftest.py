# dino_runner/tests/conftest.py
import os

# pygame surfaces and events only; never open a real window during tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
