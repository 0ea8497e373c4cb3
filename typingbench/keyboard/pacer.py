from __future__ import annotations
import logging
import random
from typing import Callable, Optional

from .config import DEFAULT_MODEL, TypingModel
from .telemetry import TypingRecorder
from .utils import _gauss_wait_ms, _sleep

log = logging.getLogger(__name__)


class _Pacer:
    """Blocks between keystrokes for a gaussian-distributed gap."""

    def __init__(
        self,
        rnd: random.Random,
        model: TypingModel = DEFAULT_MODEL,
        recorder: Optional[TypingRecorder] = None,
        sleep: Callable[[float], None] = _sleep,
    ):
        self.rnd = rnd
        self.model = model
        self.recorder = recorder
        self.sleep_fn = sleep
        self.elapsed_ms = 0  # total pause time we've accounted for

    def next_wait_ms(self) -> int:
        return self.model.min_wait_ms + _gauss_wait_ms(self.rnd, self.model.avg_wait_ms)

    def pause(self) -> int:
        wait_ms = self.next_wait_ms()
        if self.recorder is not None:
            self.recorder.log("pause", "", wait_ms)
        try:
            self.sleep_fn(wait_ms / 1000.0)
        except InterruptedError:
            # an interrupted wait counts as an expired one
            log.warning("Keystroke pause of %dms interrupted", wait_ms, exc_info=True)
        self.elapsed_ms += wait_ms
        return wait_ms
