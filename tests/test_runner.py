"""Tests for the run aggregator, the report and the command line."""

from __future__ import annotations

import math
from datetime import datetime
from typing import List
from urllib.parse import parse_qs

import httpx
import pytest
import respx

from typingbench.__main__ import main, read_documents
from typingbench.checker import CheckClient, ClientConfig, RunStats, ccfg
from typingbench.keyboard import TypingModel
from typingbench.report import csv_line, format_report
from typingbench.runner import MAX_RUNS, BenchmarkRunner, CrossRunStats, RunState

HELLO = "Hello world"
NO_ERRORS = TypingModel(
    copy_paste_prob=0.0, typo_prob=0.0, backspace_prob=0.0, check_at_most_every_ms=0
)


class FakeCheckClient:
    """Books a fixed latency per mode instead of sending requests."""

    def __init__(self, latency_ms: int = 7) -> None:
        self.latency_ms = latency_ms
        self.texts: List[str] = []

    def check(self, text: str, stats: RunStats) -> None:
        self.texts.append(text)
        for _mode in ccfg.MODES:
            stats.record(self.latency_ms)


def _runner(client, fake_clock, **kwargs) -> BenchmarkRunner:
    kwargs.setdefault("model", NO_ERRORS)
    return BenchmarkRunner(client, clock=fake_clock, sleep=fake_clock.sleep, **kwargs)


def _run_stats(total: int, checks: int) -> RunStats:
    return RunStats(warm_up_checks=0, total_time_ms=total, total_checks=checks)


# -- BenchmarkRunner ---------------------------------------------------------


def test_runs_three_times_over_all_documents(fake_clock) -> None:
    client = FakeCheckClient()
    runner = _runner(client, fake_clock, warm_up_checks=0)

    results = runner.run([HELLO, "Hi"])

    assert len(results) == MAX_RUNS == 3
    # 11 + 2 check points per run
    assert len(client.texts) == 3 * 13
    assert client.texts[:11] == [HELLO[:k] for k in range(1, 12)]
    assert results.total_times_ms == [13 * 2 * 7] * 3
    assert results.avg_times_ms == [7.0] * 3
    assert runner.state is RunState.ALL_RUNS_COMPLETE


def test_counters_reset_every_run(fake_clock) -> None:
    client = FakeCheckClient(latency_ms=5)
    runner = _runner(client, fake_clock, warm_up_checks=4)

    results = runner.run([HELLO])

    # 22 requests per run, the first 4 of each run are warm-up
    assert results.total_times_ms == [18 * 5] * 3
    assert results.avg_times_ms == [5.0] * 3


def test_no_counted_checks_gives_nan_average(fake_clock) -> None:
    runner = _runner(FakeCheckClient(), fake_clock, warm_up_checks=1000)

    results = runner.run([HELLO])

    assert results.total_times_ms == [0, 0, 0]
    assert all(math.isnan(avg) for avg in results.avg_times_ms)
    assert "NaN;NaN;NaN" in runner.report(results)


def test_invalid_model_fails_before_any_run(fake_clock) -> None:
    client = FakeCheckClient()
    with pytest.raises(ValueError):
        _runner(client, fake_clock, model=TypingModel(avg_wait_ms=1))
    assert client.texts == []


def test_report_requires_finished_runs(fake_clock) -> None:
    runner = _runner(FakeCheckClient(), fake_clock)
    with pytest.raises(RuntimeError):
        runner.report(CrossRunStats())

    results = runner.run(["ab"])
    runner.report(results)
    assert runner.state is RunState.REPORTED


def test_run_once_reports_its_own_counters(fake_clock) -> None:
    runner = _runner(FakeCheckClient(latency_ms=3), fake_clock, warm_up_checks=0)

    stats = runner.run_once(1, ["abc"])

    assert stats.total_checks == 6
    assert stats.total_time_ms == 18
    assert runner.state is RunState.RUN_COMPLETE
    assert runner.run_index == 1


# -- CrossRunStats -----------------------------------------------------------


def test_lists_are_sorted_independently() -> None:
    results = CrossRunStats()
    results.add(_run_stats(total=30, checks=10))  # avg 3
    results.add(_run_stats(total=10, checks=1))  # avg 10
    results.add(_run_stats(total=20, checks=1))  # avg 20

    ordered = results.sorted()

    assert ordered.total_times_ms == [10, 20, 30]
    assert ordered.avg_times_ms == [3.0, 10.0, 20.0]
    # insertion order is left alone
    assert results.total_times_ms == [30, 10, 20]


def test_nan_average_sorts_last() -> None:
    results = CrossRunStats()
    results.add(_run_stats(total=0, checks=0))
    results.add(_run_stats(total=8, checks=2))
    results.add(_run_stats(total=3, checks=1))

    ordered = results.sorted()

    assert ordered.avg_times_ms[:2] == [3.0, 4.0]
    assert math.isnan(ordered.avg_times_ms[2])


# -- Report ------------------------------------------------------------------

RESULTS = CrossRunStats(total_times_ms=[10, 20, 30], avg_times_ms=[3.0, 10.0, 20.5])
WHEN = datetime(2026, 10, 19, 14, 5)


def test_csv_line() -> None:
    assert csv_line(RESULTS, WHEN) == "2026-10-19 14:05,10;20;30,3.0;10.0;20.5"


def test_format_report() -> None:
    assert format_report(RESULTS, WHEN).splitlines() == [
        "Total times: [10, 20, 30] ms",
        "Avg. times per doc: [3.0, 10.0, 20.5] ms",
        "CSV: 2026-10-19 14:05,10;20;30,3.0;10.0;20.5",
    ]


# -- Command line ------------------------------------------------------------


@pytest.mark.parametrize("argv", [[], ["a.txt", "b.txt"]])
def test_wrong_usage_exits_non_zero(argv, capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(argv)
    assert excinfo.value.code != 0
    assert "usage:" in capsys.readouterr().err


def test_missing_input_file(tmp_path) -> None:
    assert main([str(tmp_path / "missing.txt")]) == 1


def test_main_end_to_end(tmp_path, respx_mock: respx.MockRouter, capsys) -> None:
    route = respx_mock.post(url__startswith=ccfg.API_URL).mock(
        return_value=httpx.Response(200, json={"matches": []})
    )
    docs = tmp_path / "docs.txt"
    docs.write_text("Hi\n", encoding="utf-8")

    assert main([str(docs)]) == 0

    assert route.called
    out = capsys.readouterr().out
    # all checks of such a short document fall into the warm-up phase
    assert "Total times: [0, 0, 0] ms" in out
    assert "CSV: " in out


def test_read_documents_splits_on_newlines_only(tmp_path) -> None:
    path = tmp_path / "docs.txt"
    path.write_bytes("a\fb c\x85d\r\nsecond\v line\n\nlast\n".encode("utf-8"))

    assert read_documents(path) == ["a\fb c\x85d", "second\v line", "", "last"]


def test_read_documents_keeps_last_line_without_newline(tmp_path) -> None:
    path = tmp_path / "docs.txt"
    path.write_text("one\ntwo", encoding="utf-8")

    assert read_documents(path) == ["one", "two"]


# -- Runner with the real client ---------------------------------------------

API_URL = "http://checker.test/v2/check"


def _failing_on(*failing_calls: int):
    """respx side effect that fails the given (1-based) requests."""
    calls = []

    def side_effect(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        if len(calls) in failing_calls:
            raise httpx.ConnectError("connection refused", request=request)
        return httpx.Response(200, json={"matches": []})

    return side_effect


def test_failed_requests_do_not_stop_the_run(fake_clock, respx_mock: respx.MockRouter) -> None:
    # "abc" -> 3 check points (requests 1-6), "de" -> 2 check points (requests 7-10)
    route = respx_mock.post(API_URL).mock(side_effect=_failing_on(3, 8))
    with CheckClient(ClientConfig(api_url=API_URL)) as client:
        runner = _runner(client, fake_clock, warm_up_checks=0)
        stats = runner.run_once(1, ["abc", "de"])

    assert route.call_count == 10
    texts = [parse_qs(call.request.content.decode("utf-8"))["text"][0] for call in route.calls]
    assert texts == ["a", "a", "ab", "ab", "abc", "abc", "d", "d", "de", "de"]
    assert stats.total_checks == 8
    assert stats.total_checks_skipped == 0
    assert stats.total_time_ms >= 0
    assert not math.isnan(stats.average_ms)


def test_failures_spread_over_all_runs_keep_every_run_counted(
    fake_clock, respx_mock: respx.MockRouter
) -> None:
    route = respx_mock.post(API_URL).mock(side_effect=_failing_on(*range(3, 31, 3)))
    with CheckClient(ClientConfig(api_url=API_URL)) as client:
        runner = _runner(client, fake_clock, warm_up_checks=2)
        results = runner.run(["abc", "de"])

    # 10 requests per run, every third one fails
    assert route.call_count == 30
    assert len(results) == MAX_RUNS
    assert not any(math.isnan(avg) for avg in results.avg_times_ms)
    assert results.total_times_ms == sorted(results.total_times_ms)
