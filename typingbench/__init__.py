from __future__ import annotations
from .keyboard import simulate_typing, summarize_typing, TypingModel, recorder
from .checker import CheckClient, ClientConfig, RunStats
from .runner import BenchmarkRunner, CrossRunStats, MAX_RUNS
from .report import csv_line, format_report

__all__ = [
    "simulate_typing",
    "summarize_typing",
    "TypingModel",
    "recorder",
    "CheckClient",
    "ClientConfig",
    "RunStats",
    "BenchmarkRunner",
    "CrossRunStats",
    "MAX_RUNS",
    "csv_line",
    "format_report",
]
