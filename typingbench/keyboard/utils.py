from __future__ import annotations
import random
import time


def _sleep(dt: float) -> None:
    time.sleep(max(0.0, dt))


def _gauss_wait_ms(rnd: random.Random, avg_ms: int) -> int:
    """Draw a keystroke gap in ms from N(avg, avg), redrawn until positive."""
    while True:
        wait_ms = int(round(rnd.gauss(0.0, 1.0) * avg_ms + avg_ms))
        if wait_ms > 0:
            return wait_ms


def _elapsed_ms(since: float, now: float) -> float:
    return (now - since) * 1000.0
