"""Parameters shared by all generators and a thread-safe random source."""

from __future__ import annotations

import dataclasses
import random
import threading
import time
from dataclasses import dataclass
from typing import Any


class LockedRandom(random.Random):
    """A ``random.Random`` whose state is guarded by a lock."""

    def __init__(self, seed: Any = None) -> None:
        self._lock = threading.Lock()
        super().__init__(seed)

    def random(self) -> float:
        with self._lock:
            return super().random()

    def getrandbits(self, k: int) -> int:
        with self._lock:
            return super().getrandbits(k)

    def seed(self, a: Any = None, version: int = 2) -> None:
        with self._lock:
            super().seed(a, version)


@dataclass
class GenParameters:
    """Size limits, shrink limit and random source used by generators."""

    min_size: int
    max_size: int
    max_shrink_count: int
    rng: random.Random

    def with_size(self, size: int) -> "GenParameters":
        """Return a copy with ``max_size`` replaced."""
        return dataclasses.replace(self, max_size=size)

    def next_bool(self) -> bool:
        return self.rng.getrandbits(63) & 1 == 0

    def next_int64(self) -> int:
        value = self.rng.getrandbits(63)
        return -value if self.next_bool() else value

    def next_uint64(self) -> int:
        first = self.rng.getrandbits(63)
        second = self.rng.getrandbits(63)
        return (first << 1) ^ second

    def clone_with_seed(self, seed: int) -> "GenParameters":
        """Return a copy driven by a fresh random source seeded with ``seed``."""
        return GenParameters(
            min_size=self.min_size,
            max_size=self.max_size,
            max_shrink_count=self.max_shrink_count,
            rng=LockedRandom(seed),
        )


def default_gen_parameters() -> GenParameters:
    """Default parameters seeded from the current time."""
    return GenParameters(
        min_size=0,
        max_size=100,
        max_shrink_count=1000,
        rng=LockedRandom(time.time_ns()),
    )


def min_gen_parameters() -> GenParameters:
    """Minimal parameters; rarely useful for real testing."""
    return GenParameters(
        min_size=0,
        max_size=0,
        max_shrink_count=0,
        rng=LockedRandom(time.time_ns()),
    )