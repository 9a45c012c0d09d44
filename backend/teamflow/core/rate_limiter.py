"""
Rate Limiting for TeamFlow API
==============================
Implements rate limiting using slowapi.

Storage defaults to in-process memory; point RATE_LIMIT_STORAGE_URI at
redis://... when running several workers.

Special endpoints have their own limits:
- /auth/login: 5 req/min (brute force protection)
- /auth/register: 3 req/min
- /templates/{id}/generate: GENERATION_RATE_LIMIT (bulk row creation)
"""

from slowapi import Limiter
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded
from fastapi import Request
from fastapi.responses import JSONResponse

from teamflow.core.config import settings
from teamflow.core.logging_config import logger


def get_user_identifier(request: Request) -> str:
    """
    Get rate limit key based on user authentication.

    Priority:
    1. Authenticated user ID (set on request.state by the auth dependency)
    2. API key header
    3. IP address (for anonymous users)
    """
    user_id = getattr(request.state, 'user_id', None)
    if user_id:
        return f"user:{user_id}"

    api_key = request.headers.get("X-API-Key")
    if api_key:
        return f"apikey:{api_key[:16]}"  # Use first 16 chars for privacy

    return f"ip:{get_remote_address(request)}"


limiter = Limiter(
    key_func=get_user_identifier,
    default_limits=[f"{settings.RATE_LIMIT_PER_MINUTE}/minute"],
    storage_uri=settings.RATE_LIMIT_STORAGE_URI,
    strategy="fixed-window",
    enabled=settings.RATE_LIMIT_ENABLED,
)


async def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded):
    """
    Custom handler for rate limit exceeded errors.

    Returns a JSON body with the limit that was hit and a Retry-After header.
    """
    retry_after = "60"

    logger.warning(
        f"[RateLimit] Exceeded for {get_user_identifier(request)}: {exc.detail}"
    )

    return JSONResponse(
        status_code=429,
        content={
            "success": False,
            "error": {
                "code": "RATE_LIMITED",
                "message": "Too many requests. Please slow down.",
                "details": {"limit": str(exc.detail), "retry_after_seconds": int(retry_after)},
            },
        },
        headers={
            "Retry-After": retry_after,
            "X-RateLimit-Limit": str(settings.RATE_LIMIT_PER_MINUTE),
        }
    )


def auth_rate_limit():
    """Rate limit for auth endpoints (5/min)"""
    return limiter.limit("5/minute", key_func=get_user_identifier)


def generation_rate_limit():
    """Rate limit for template generation"""
    return limiter.limit(settings.GENERATION_RATE_LIMIT, key_func=get_user_identifier)
