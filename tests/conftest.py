"""Shared pytest fixtures: deterministic clocks and random sources."""

from __future__ import annotations

import random
from typing import Callable, Iterable, List

import pytest

from typingbench.keyboard import TypingRecorder


class FakeClock:
    """Monotonic clock that only moves when something sleeps on it."""

    def __init__(self) -> None:
        self.now = 0.0
        self.sleeps: List[float] = []

    def __call__(self) -> float:
        return self.now

    def sleep(self, dt: float) -> None:
        self.sleeps.append(dt)
        self.now += dt


class ScriptedRandom(random.Random):
    """random() replays the given values, then returns 0.99 (no event fires)."""

    def __init__(self, values: Iterable[float] = ()) -> None:
        super().__init__(0)
        self._values = list(values)

    def random(self) -> float:
        if self._values:
            return self._values.pop(0)
        return 0.99


class ScriptedGauss(random.Random):
    """gauss() replays the given standard-normal draws."""

    def __init__(self, values: Iterable[float]) -> None:
        super().__init__(0)
        self._values = list(values)

    def gauss(self, mu: float = 0.0, sigma: float = 1.0) -> float:
        return mu + sigma * self._values.pop(0)


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def scripted_random() -> Callable[..., ScriptedRandom]:
    return ScriptedRandom


@pytest.fixture
def scripted_gauss() -> Callable[..., ScriptedGauss]:
    return ScriptedGauss


@pytest.fixture
def rec() -> TypingRecorder:
    return TypingRecorder()
