from __future__ import annotations
import logging
from dataclasses import dataclass

from .config import ccfg

log = logging.getLogger(__name__)


@dataclass
class RunStats:
    """Latency counters for a single run over all documents."""

    warm_up_checks: int = ccfg.WARM_UP_CHECKS
    total_time_ms: int = 0
    total_checks: int = 0
    total_checks_skipped: int = 0

    def record(self, latency_ms: int) -> bool:
        """Account one successful check; returns False while still warming up."""
        if self.total_checks_skipped < self.warm_up_checks:
            log.info("Warm-up, ignoring result...")
            self.total_checks_skipped += 1
            return False
        self.total_checks += 1
        self.total_time_ms += latency_ms
        return True

    @property
    def average_ms(self) -> float:
        """Mean latency of counted checks, NaN if none were counted."""
        if self.total_checks == 0:
            return float("nan")
        return self.total_time_ms / self.total_checks
