"""Timed HTTP round-trip against a registry endpoint."""

from __future__ import annotations

import logging
import time

import requests
from requests.exceptions import RequestException

from .errors import ProbeError

logger = logging.getLogger(__name__)

DEFAULT_PING_TIMEOUT = 5.0


def probe(url: str, *, timeout: float = DEFAULT_PING_TIMEOUT) -> float:
    """Return the response time of ``url`` in milliseconds."""

    target = url[:-1] if url.endswith("/") else url
    started = time.perf_counter()
    try:
        response = requests.get(target, timeout=timeout)
    except RequestException as exc:
        raise ProbeError(f"no response from {target}: {exc}") from exc
    elapsed = (time.perf_counter() - started) * 1000.0
    logger.debug("probe url=%s status=%s elapsed=%.1fms", target, response.status_code, elapsed)
    return elapsed
