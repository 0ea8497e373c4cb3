from .behaviors import simulate_typing, step, TypingState
from .analysis import summarize_typing
from .config import kcfg, TypingModel, DEFAULT_MODEL
from .telemetry import recorder, TypingRecorder

__all__ = [
    "simulate_typing",
    "step",
    "TypingState",
    "summarize_typing",
    "kcfg",
    "TypingModel",
    "DEFAULT_MODEL",
    "recorder",
    "TypingRecorder",
]
