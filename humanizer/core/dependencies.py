"""
FastAPI dependencies shared by the route modules.

  - get_aggregator: the process-wide DetectionAggregator (overridable in tests)
  - rate_limited:   per-client-IP request budget for /api/* routes
"""

import logging

from fastapi import Request

from humanizer.core.rate_limiter import check_rate_limit
from humanizer.detection.aggregator import DetectionAggregator, build_aggregator

logger = logging.getLogger(__name__)

_aggregator: DetectionAggregator | None = None


def get_aggregator() -> DetectionAggregator:
    global _aggregator
    if _aggregator is None:
        _aggregator = build_aggregator()
        logger.info(f"[STARTUP] Detection roster: {', '.join(_aggregator.roster) or '(empty)'}")
    return _aggregator


def get_client_ip(request: Request) -> str:
    """Extracts the real client IP from proxy headers, falling back to host."""
    cf_ip = request.headers.get("cf-connecting-ip")
    if cf_ip:
        return cf_ip

    x_forwarded = request.headers.get("x-forwarded-for")
    if x_forwarded:
        return x_forwarded.split(",")[0].strip()

    return request.client.host if request.client else "127.0.0.1"


def rate_limited(request: Request) -> None:
    check_rate_limit(get_client_ip(request))
