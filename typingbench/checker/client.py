"""Timed HTTP client for the text-checking API.

Every check point is sent twice, once per check mode. The httpx client is
built once, but without keep-alive slots: each request opens a fresh
connection which is closed again afterwards, so no request benefits from a
socket warmed up by an earlier one. Only the request itself is timed.
"""

from __future__ import annotations

import logging
import time
from typing import Optional

import httpx

from ..utils import abbreviate
from .config import ClientConfig, ccfg
from .stats import RunStats

log = logging.getLogger(__name__)


class CheckClient:
    """Sends check requests and books their latency on a RunStats."""

    def __init__(self, config: Optional[ClientConfig] = None) -> None:
        self.config: ClientConfig = config if config is not None else ClientConfig()
        self.url: httpx.URL = httpx.URL(self.config.api_url, params=ccfg.QUERY_PARAMS)
        self._client: httpx.Client = self._open_client()

    def _open_client(self) -> httpx.Client:
        """Create the httpx client honouring the keep-alive setting."""
        if self.config.keep_alive:
            return httpx.Client(timeout=self.config.timeout_s)
        return httpx.Client(
            timeout=self.config.timeout_s,
            limits=httpx.Limits(max_keepalive_connections=0),
            headers={"Connection": "close"},
        )

    def close(self) -> None:
        """Close the httpx client."""
        self._client.close()

    def __enter__(self) -> "CheckClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def check(self, text: str, stats: RunStats) -> None:
        """Check `text` in every mode, one request after the other."""
        for mode in ccfg.MODES:
            self.check_by_post(text, mode, stats)

    def check_by_post(self, text: str, mode: str, stats: RunStats) -> Optional[int]:
        """POST one check and return its latency in ms, or None if it failed.

        Failures are logged and left out of the statistics; they never
        propagate, so one bad request cannot end a benchmark run.
        """
        data = {"mode": mode, "text": text, **ccfg.FORM_PARAMS}
        start = time.perf_counter()
        try:
            response = self._client.post(self.url, data=data)
            response.read()
            response.raise_for_status()
        except httpx.HTTPError as exc:
            log.warning(
                "Got error from %s (%d chars): %s, text was (%d chars): '%s'",
                self.url,
                len(text),
                exc,
                len(text),
                abbreviate(text, ccfg.PREVIEW_CHARS),
                exc_info=True,
            )
            return None

        latency_ms = int(round((time.perf_counter() - start) * 1000.0))
        log.info("%5dms %20s: %s", latency_ms, mode, text)
        stats.record(latency_ms)
        return latency_ms
