"""Rate limiting (slowapi) for the public endpoints.

Clients are keyed on the connection address. Behind a proxy, run uvicorn with
``--proxy-headers --forwarded-allow-ips`` so the address reflects the client.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address

from infrastructure.logging import get_module_logger

logger = get_module_logger()

# Load balancer health checks poll the system endpoints every few seconds
SYSTEM_RATE_LIMIT = "50/minute"

limiter = Limiter(key_func=get_remote_address)


async def rate_limit_handler(request: Request, exc: Exception):
    """Return 429 with a JSON message instead of slowapi's plain text."""
    if isinstance(exc, RateLimitExceeded):
        logger.warning("rate_limit_exceeded", path=request.url.path)
        return JSONResponse(
            status_code=429,
            content={"message": "Rate limit exceeded"},
        )


def setup_rate_limiter(app: FastAPI) -> None:
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_handler)


def get_limiter() -> Limiter:
    return limiter
