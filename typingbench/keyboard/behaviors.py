from __future__ import annotations
import logging
import random
import time
from dataclasses import dataclass, field
from typing import Callable, Optional

from ..utils import HiResTimer, clamp as _clamp
from .analysis import summarize_typing
from .config import DEFAULT_MODEL, TypingModel, kcfg
from .pacer import _Pacer
from .primitives import TypedBuffer
from .telemetry import TypingRecorder, recorder as global_recorder
from .utils import _elapsed_ms, _sleep

log = logging.getLogger(__name__)

# Route debug prints in this module through logging
print = log.debug

CheckCallback = Callable[[str], None]


@dataclass
class TypingState:
    """Where one simulation pass over a document stands."""

    cursor: int = 0  # index of the next document char to type
    buffer: TypedBuffer = field(default_factory=TypedBuffer)
    last_check: Optional[float] = None  # clock() of the last emitted check point


def _emit_check(
    state: TypingState,
    emit: CheckCallback,
    clock: Callable[[], float],
    rec: TypingRecorder,
) -> None:
    text = state.buffer.text
    rec.log("check", text)
    emit(text)
    state.last_check = clock()


def step(
    state: TypingState,
    doc: str,
    emit: CheckCallback,
    *,
    rnd: random.Random,
    model: TypingModel = DEFAULT_MODEL,
    clock: Callable[[], float] = time.monotonic,
    recorder: Optional[TypingRecorder] = None,
) -> int:
    """
    Type (or fail to type) the document char under the cursor.

    Returns the number of check points emitted, which is 0, 1 or 2.
    """
    rec = recorder if recorder is not None else global_recorder
    buf = state.buffer
    i = state.cursor
    emitted = 0

    if rnd.random() < model.typo_prob:
        if rnd.random() < 0.5:
            buf.append(model.typo_char)  # randomly inserted char
            rec.log("typo-insert", buf.text)
        elif buf.drop_last():  # random char left out
            rec.log("typo-drop", buf.text)

    backspaced = (
        rnd.random() < model.backspace_prob
        and len(buf) > kcfg.BACKSPACE_MIN_BUFFER
    )
    if backspaced:
        buf.drop_last()
        rec.log("backspace", buf.text)
        _emit_check(state, emit, clock, rec)
        emitted += 1
        # back two, then on by one as after any keystroke; never before the start
        state.cursor = _clamp(i - 1, 0, len(doc))
    else:
        buf.append(doc[i])
        rec.log("char", buf.text)
        state.cursor = i + 1

    at_end = not backspaced and i == len(doc) - 1
    if (
        state.last_check is None
        or _elapsed_ms(state.last_check, clock()) > model.check_at_most_every_ms
        or at_end
    ):
        _emit_check(state, emit, clock, rec)
        emitted += 1
    return emitted


def simulate_typing(
    doc: str,
    emit: CheckCallback,
    *,
    rnd: Optional[random.Random] = None,
    model: TypingModel = DEFAULT_MODEL,
    clock: Callable[[], float] = time.monotonic,
    sleep: Callable[[float], None] = _sleep,
    recorder: Optional[TypingRecorder] = None,
) -> int:
    """
    Simulate a user typing `doc`, calling `emit(text)` at every check point.

    A document is either pasted in one go (a single check point with the
    full text) or typed char by char with typos, backspace corrections and
    gaussian pauses between keystrokes. Returns the number of check points.
    """
    if rnd is None:
        rnd = random.Random(kcfg.SEED)
    rec = recorder if recorder is not None else global_recorder
    rec.reset(doc_length=len(doc))

    if rnd.random() < model.copy_paste_prob:
        rec.log("paste", doc)
        emit(doc)
        if log.isEnabledFor(logging.DEBUG):
            print(summarize_typing(rec))
        return 1

    pacer = _Pacer(rnd, model, rec, sleep=sleep)
    state = TypingState()
    checks = 0
    with HiResTimer():
        while state.cursor < len(doc):
            checks += step(
                state, doc, emit, rnd=rnd, model=model, clock=clock, recorder=rec
            )
            pacer.pause()

    if log.isEnabledFor(logging.DEBUG):
        print(summarize_typing(rec))
    return checks
