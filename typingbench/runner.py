from __future__ import annotations
import enum
import functools
import logging
import math
import random
import time
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, List, Optional, Sequence

from .checker import CheckClient, RunStats, ccfg
from .keyboard import DEFAULT_MODEL, TypingModel, TypingRecorder, kcfg, simulate_typing
from .report import format_report

log = logging.getLogger(__name__)

MAX_RUNS = 3  # keep at 3, the chart library needs 3 values for the error bars


class RunState(enum.Enum):
    IDLE = "idle"
    RUN_IN_PROGRESS = "run-in-progress"
    RUN_COMPLETE = "run-complete"
    ALL_RUNS_COMPLETE = "all-runs-complete"
    REPORTED = "reported"


def _nan_last(value: float):
    return (math.isnan(value), value)


@dataclass
class CrossRunStats:
    """Per-run totals and averages collected over all runs."""

    total_times_ms: List[int] = field(default_factory=list)
    avg_times_ms: List[float] = field(default_factory=list)

    def add(self, stats: RunStats) -> None:
        self.total_times_ms.append(stats.total_time_ms)
        self.avg_times_ms.append(stats.average_ms)

    def sorted(self) -> "CrossRunStats":
        """Sort both lists on their own, so entry i of each may stem from different runs."""
        return CrossRunStats(
            total_times_ms=sorted(self.total_times_ms),
            avg_times_ms=sorted(self.avg_times_ms, key=_nan_last),
        )

    def __len__(self) -> int:
        return len(self.total_times_ms)


class BenchmarkRunner:
    """Types every document MAX_RUNS times and aggregates check latencies."""

    def __init__(
        self,
        client: CheckClient,
        *,
        model: TypingModel = DEFAULT_MODEL,
        rnd: Optional[random.Random] = None,
        warm_up_checks: int = ccfg.WARM_UP_CHECKS,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
        recorder: Optional[TypingRecorder] = None,
    ) -> None:
        # configuration errors surface before any run starts
        self.model = model.validate()
        self.client = client
        self.rnd = rnd if rnd is not None else random.Random(kcfg.SEED)
        self.warm_up_checks = warm_up_checks
        self.clock = clock
        self.sleep = sleep
        self.recorder = recorder
        self.state = RunState.IDLE
        self.run_index = 0

    def run(self, docs: Sequence[str]) -> CrossRunStats:
        results = CrossRunStats()
        for i in range(1, MAX_RUNS + 1):
            results.add(self.run_once(i, docs))
        self.state = RunState.ALL_RUNS_COMPLETE
        return results.sorted()

    def run_once(self, index: int, docs: Sequence[str]) -> RunStats:
        """One pass over all documents with freshly reset counters."""
        self.state = RunState.RUN_IN_PROGRESS
        self.run_index = index
        log.info("=== Run %d of %d =====================", index, MAX_RUNS)

        stats = RunStats(warm_up_checks=self.warm_up_checks)
        emit = functools.partial(self.client.check, stats=stats)
        for doc in docs:
            simulate_typing(
                doc,
                emit,
                rnd=self.rnd,
                model=self.model,
                clock=self.clock,
                sleep=self.sleep,
                recorder=self.recorder,
            )

        self.state = RunState.RUN_COMPLETE
        log.info(
            "Run %d done: %d checks counted in %dms, %d warm-up checks skipped",
            index,
            stats.total_checks,
            stats.total_time_ms,
            stats.total_checks_skipped,
        )
        return stats

    def report(self, results: CrossRunStats, now: Optional[datetime] = None) -> str:
        if self.state is not RunState.ALL_RUNS_COMPLETE:
            raise RuntimeError(f"Cannot report in state {self.state.value}")
        text = format_report(results, now)
        self.state = RunState.REPORTED
        return text
