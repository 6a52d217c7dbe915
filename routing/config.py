#Purpose: Where the routed daemon lives and how long we wait for it.
#Values come from the environment (or a .env file), e.g.:
#ROUTED_HOST=localhost
#ROUTED_PORT=5000
#ROUTED_TIMEOUT=10
#ROUTED_TIMEOUT empty/unset means no timeout override (requests default).

from __future__ import annotations

import math
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from routing.errors import ConfigError
from routing.models import ServiceEndpoint

load_dotenv()

DEFAULT_HOST = "localhost"
DEFAULT_PORT = 5000


@dataclass(frozen=True)
class RoutedSettings:
    endpoint: ServiceEndpoint
    timeout: Optional[float] = None


def load_settings() -> RoutedSettings:
    """
    Read ROUTED_HOST / ROUTED_PORT / ROUTED_TIMEOUT.

    Raises ConfigError for values that cannot be used (bad port, bad timeout).
    """
    host = os.getenv("ROUTED_HOST") or DEFAULT_HOST
    port = os.getenv("ROUTED_PORT") or DEFAULT_PORT

    return RoutedSettings(
        endpoint=ServiceEndpoint(host, port),
        timeout=parse_timeout(os.getenv("ROUTED_TIMEOUT")),
    )


def parse_timeout(raw: Optional[str]) -> Optional[float]:
    if raw is None or not raw.strip():
        return None
    try:
        timeout = float(raw)
    except ValueError:
        raise ConfigError(f"timeout is not a number: {raw!r}") from None
    if not math.isfinite(timeout) or timeout <= 0:
        raise ConfigError(f"timeout must be a positive number of seconds, got {raw!r}")
    return timeout
