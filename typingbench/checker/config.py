from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Dict, Tuple


class ccfg:
    """Check API endpoint and the fixed request payload the API expects."""

    API_URL = os.environ.get("TYPINGBENCH_API_URL", "http://localhost:8081/v2/check")
    REQUEST_TIMEOUT_S = float(os.environ.get("TYPINGBENCH_TIMEOUT_S", "30"))

    # Each check point is sent once per mode
    MODES: Tuple[str, ...] = ("textLevelOnly", "allButTextLevelOnly")

    # Checks at start-up not to be considered for calculation of average values
    WARM_UP_CHECKS = 20

    # Length of the text preview in failure logs
    PREVIEW_CHARS = 100

    QUERY_PARAMS: Dict[str, str] = {
        "instanceId": "10914:1608926270970",
        "c": "1",
        "v": "0.0.0",
    }
    FORM_PARAMS: Dict[str, str] = {
        "textSessionId": "10914:1608926270970",
        "enableHiddenRules": "true",
        "motherTongue": "de",
        "language": "auto",
        "noopLanguages": "de,en",
        "preferredLanguages": "de,en",
        "preferredVariants": "en-US,de-DE,pt-BR,ca-ES",
        "disabledRules": "WHITESPACE_RULE",
        "useragent": "performance-test",
    }


@dataclass(frozen=True)
class ClientConfig:
    api_url: str = ccfg.API_URL
    timeout_s: float = ccfg.REQUEST_TIMEOUT_S
    # keep-alive adds about a second of overhead per check against the API
    keep_alive: bool = False
