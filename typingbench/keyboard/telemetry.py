from __future__ import annotations
from dataclasses import dataclass, field
from typing import List
import time


@dataclass(frozen=True)
class TypingEvent:
    t: float
    kind: str  # 'char' | 'typo-insert' | 'typo-drop' | 'backspace' | 'check' | 'paste' | 'pause'
    value: str  # buffer text after the event, or '' for pauses
    ms: int = 0  # planned pause length for 'pause' events


@dataclass
class TypingRecorder:
    events: List[TypingEvent] = field(default_factory=list)
    start_ts: float = field(default_factory=lambda: time.perf_counter())
    doc_length: int = 0

    def _now(self) -> float:
        return time.perf_counter() - self.start_ts

    def log(self, kind: str, value: str, ms: int = 0) -> None:
        self.events.append(TypingEvent(self._now(), kind, value, ms))

    def of_kind(self, *kinds: str) -> List[TypingEvent]:
        return [ev for ev in self.events if ev.kind in kinds]

    def reset(self, doc_length: int = 0) -> None:
        self.events.clear()
        self.start_ts = time.perf_counter()
        self.doc_length = doc_length


recorder = TypingRecorder()
