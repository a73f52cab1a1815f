"""Per-client rate limiting with slowapi, keyed by the forwarded client address."""

import logging
from typing import Any, Dict

from fastapi import Request
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded

logger = logging.getLogger(__name__)


def client_key(request: Request) -> str:
    """First forwarded address, then the real-ip header, then the socket peer."""
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        return forwarded.split(",")[0].strip()
    real_ip = request.headers.get("x-real-ip")
    if real_ip:
        return real_ip.strip()
    if request.client and request.client.host:
        return request.client.host
    return "unknown"


def limit_value(limits: Dict[str, Any]) -> str:
    """{'limit': 10, 'window_seconds': 900} -> '10/900seconds'"""
    return f"{int(limits['limit'])}/{int(limits['window_seconds'])}seconds"


def build_limiter() -> Limiter:
    # Fixed window opened by the client's first request; memory storage
    # expires idle clients along with their window.
    return Limiter(key_func=client_key, strategy="fixed-window", storage_uri="memory://")


async def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded):
    logger.warning("Rate limit exceeded for %s on %s", client_key(request), request.url.path)
    return JSONResponse(status_code=429, content={"error": exc.detail})
