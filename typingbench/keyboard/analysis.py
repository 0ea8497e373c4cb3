from __future__ import annotations
from typing import Optional
from .telemetry import TypingRecorder, recorder as global_recorder


def summarize_typing(rec: Optional[TypingRecorder] = None) -> str:
    """
    Reports for the last simulated document:
      - Wall-clock duration and total planned pause time
      - Characters typed (including retyped ones)
      - Typos inserted / dropped and backspace corrections
      - Check points emitted, and whether the document was pasted
    """
    rec = rec if rec is not None else global_recorder
    evs = rec.events
    if not evs:
        return "No typing data"

    counts = {}
    pause_ms = 0
    for ev in evs:
        counts[ev.kind] = counts.get(ev.kind, 0) + 1
        if ev.kind == "pause":
            pause_ms += ev.ms

    total_time = max(0.0, evs[-1].t - evs[0].t)
    checks = counts.get("check", 0) + counts.get("paste", 0)

    return (
        "Typing Summary:\n"
        f"  Document length: {rec.doc_length} chars\n"
        f"  Pasted: {'yes' if counts.get('paste') else 'no'}\n"
        f"  Total duration: {total_time:.2f}s (pauses {pause_ms}ms)\n"
        f"  Chars typed: {counts.get('char', 0)}\n"
        f"  Typos (inserted/dropped): {counts.get('typo-insert', 0)} / {counts.get('typo-drop', 0)}\n"
        f"  Backspace corrections: {counts.get('backspace', 0)}\n"
        f"  Check points: {checks}"
    )
