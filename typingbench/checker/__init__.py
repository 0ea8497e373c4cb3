from .client import CheckClient
from .config import ccfg, ClientConfig
from .stats import RunStats

__all__ = [
    "CheckClient",
    "ccfg",
    "ClientConfig",
    "RunStats",
]
