# dino_runner/game/storage.py
"""
Key/value stores for the best score.

Every store exposes get/set/remove over strings. SafeStore wraps any of them so a
broken disk, a read-only home or a corrupt file never reaches the game loop:
reads come back as None and writes/deletes become no-ops.
"""
from __future__ import annotations
import json
import math
from pathlib import Path
from typing import Dict, Optional, Protocol, Union

from .config import BEST_SCORE_KEY


class Store(Protocol):
    def get(self, key: str) -> Optional[str]: ...
    def set(self, key: str, value: str) -> None: ...
    def remove(self, key: str) -> None: ...


class MemoryStore:
    """Process-local store, mostly for tests and headless runs."""
    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self.data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = str(value)

    def remove(self, key: str) -> None:
        self.data.pop(key, None)


class JsonFileStore:
    """One JSON object on disk; each call re-reads the file so other processes' writes are seen."""
    def __init__(self, path: Union[str, Path]):
        self.path = Path(path).expanduser()

    def _read(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        data = json.loads(self.path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError(f"Expected a JSON object in {self.path}")
        return data

    def _read_for_update(self) -> Dict[str, str]:
        """Like _read, but a corrupt or non-object file counts as empty so it gets overwritten."""
        try:
            return self._read()
        except ValueError:
            return {}

    def _write(self, data: Dict[str, str]):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_name(self.path.name + ".tmp")
        tmp.write_text(json.dumps(data, indent=2, sort_keys=True), encoding="utf-8")
        tmp.replace(self.path)

    def get(self, key: str) -> Optional[str]:
        value = self._read().get(key)
        return None if value is None else str(value)

    def set(self, key: str, value: str) -> None:
        data = self._read_for_update()
        data[key] = str(value)
        self._write(data)

    def remove(self, key: str) -> None:
        data = self._read_for_update()
        data.pop(key, None)
        self._write(data)


class SafeStore:
    def __init__(self, inner: Store):
        self.inner = inner

    def get(self, key: str) -> Optional[str]:
        try:
            return self.inner.get(key)
        except Exception:
            return None

    def set(self, key: str, value: str) -> None:
        try:
            self.inner.set(key, value)
        except Exception:
            return

    def remove(self, key: str) -> None:
        try:
            self.inner.remove(key)
        except Exception:
            return


def parse_score(raw: Optional[str]) -> int:
    """Stored text -> non-negative int; anything unreadable counts as 0."""
    if raw is None:
        return 0
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return 0
    if not math.isfinite(value) or value < 0:
        return 0
    return int(value)


class BestScore:
    """
    In-memory best score mirrored to a store under a fixed key.
    The in-memory value is authoritative for the session even when the store fails.
    """
    def __init__(self, store: Store, key: str = BEST_SCORE_KEY):
        self.store = store if isinstance(store, SafeStore) else SafeStore(store)
        self.key = key
        self.value = parse_score(self.store.get(key))

    def submit(self, score: float) -> bool:
        """Record floor(score) if it beats the current best. Returns True on a new best."""
        floored = int(math.floor(score))
        if floored > self.value:
            self.value = floored
            self.store.set(self.key, str(self.value))
            return True
        return False

    def reset(self):
        self.value = 0
        self.store.remove(self.key)
