from __future__ import annotations
import math
from datetime import datetime
from typing import Iterable, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .runner import CrossRunStats

CSV_DATE_FORMAT = "%Y-%m-%d %H:%M"


def _fmt(value: float) -> str:
    if isinstance(value, float) and math.isnan(value):
        return "NaN"
    return str(value)


def _fmt_list(values: Iterable[float]) -> str:
    return "[" + ", ".join(_fmt(v) for v in values) + "]"


def csv_line(results: "CrossRunStats", now: Optional[datetime] = None) -> str:
    """`date,total1;total2;total3,avg1;avg2;avg3`, easy to grep into a CSV file."""
    now = now if now is not None else datetime.now()
    return ",".join(
        [
            now.strftime(CSV_DATE_FORMAT),
            ";".join(_fmt(v) for v in results.total_times_ms),
            ";".join(_fmt(v) for v in results.avg_times_ms),
        ]
    )


def format_report(results: "CrossRunStats", now: Optional[datetime] = None) -> str:
    return (
        f"Total times: {_fmt_list(results.total_times_ms)} ms\n"
        f"Avg. times per doc: {_fmt_list(results.avg_times_ms)} ms\n"
        f"CSV: {csv_line(results, now)}"
    )
