from __future__ import annotations
from dataclasses import dataclass


class kcfg:
    # Error model
    COPY_PASTE_PROB = 0.05  # per document
    TYPO_PROB = 0.03  # per character
    BACKSPACE_PROB = 0.05  # per character
    TYPO_CHAR = "x"  # randomly inserted char
    BACKSPACE_MIN_BUFFER = 2  # backspace only once the buffer is longer than this

    # Pacing (more real: MIN_WAIT_MS = 10, AVG_WAIT_MS = 100)
    MIN_WAIT_MS = 0
    AVG_WAIT_MS = 10  # don't set below 2, the positive-wait redraw loop may never end

    # Throttle (more real: 1500)
    CHECK_AT_MOST_EVERY_MS = 10

    SEED = 123


@dataclass(frozen=True)
class TypingModel:
    """Parameters of the typing model, fixed to the kcfg values at runtime."""

    copy_paste_prob: float = kcfg.COPY_PASTE_PROB
    typo_prob: float = kcfg.TYPO_PROB
    backspace_prob: float = kcfg.BACKSPACE_PROB
    min_wait_ms: int = kcfg.MIN_WAIT_MS
    avg_wait_ms: int = kcfg.AVG_WAIT_MS
    check_at_most_every_ms: int = kcfg.CHECK_AT_MOST_EVERY_MS
    typo_char: str = kcfg.TYPO_CHAR

    def validate(self) -> "TypingModel":
        """Raise ValueError for a model that cannot be simulated."""
        if self.avg_wait_ms < 2:
            raise ValueError(f"avg_wait_ms must be > 1, got {self.avg_wait_ms}")
        for name in ("copy_paste_prob", "typo_prob", "backspace_prob"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be within [0, 1], got {value}")
        if self.backspace_prob >= 0.5:
            # each backspace moves the cursor back by one
            raise ValueError(
                f"backspace_prob must be < 0.5, got {self.backspace_prob}"
            )
        if self.min_wait_ms < 0 or self.check_at_most_every_ms < 0:
            raise ValueError("min_wait_ms and check_at_most_every_ms must be >= 0")
        if len(self.typo_char) != 1:
            raise ValueError(f"typo_char must be a single character: {self.typo_char!r}")
        return self


DEFAULT_MODEL = TypingModel()
