"""Per-IP request rate limiting backed by Redis."""
import logging
import time

from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from config.redis_config import get_redis_client

logger = logging.getLogger(__name__)

EXCLUDED_PATHS = {"/health_check"}


class RateLimiterMiddleware(BaseHTTPMiddleware):
    """
    Fixed-window rate limiter.

    Each client IP gets ``calls`` requests per ``period`` seconds. The counter
    is incremented, its expiry set on the first hit of a window (EXPIRE NX,
    Redis 7+) and its remaining TTL read in one Redis pipeline. When Redis is
    unavailable the request is let through.
    """

    def __init__(self, app, calls: int = 100, period: int = 60, redis_client=None):
        super().__init__(app)
        self.calls = calls
        self.period = period
        self.redis_client = redis_client

    def _get_redis(self):
        return self.redis_client if self.redis_client is not None else get_redis_client()

    @staticmethod
    def get_client_ip(request: Request) -> str:
        forwarded_for = request.headers.get("X-Forwarded-For")
        if forwarded_for:
            return forwarded_for.split(",")[0].strip()
        real_ip = request.headers.get("X-Real-IP")
        if real_ip:
            return real_ip.strip()
        return request.client.host if request.client else "unknown"

    async def dispatch(self, request: Request, call_next):
        if request.url.path in EXCLUDED_PATHS:
            return await call_next(request)

        key = f"rate_limit:{self.get_client_ip(request)}"
        try:
            pipe = self._get_redis().pipeline()
            pipe.incr(key)
            pipe.expire(key, self.period, nx=True)
            pipe.ttl(key)
            count, _, ttl = pipe.execute()
            count = int(count)
        except Exception as e:
            logger.warning(f"Rate limiter unavailable, allowing request: {e}")
            return await call_next(request)

        # ttl is -1 or -2 if the key lost its expiry between commands
        window_left = int(ttl) if ttl is not None and int(ttl) > 0 else self.period
        reset_at = int(time.time()) + window_left
        headers = {
            "X-RateLimit-Limit": str(self.calls),
            "X-RateLimit-Remaining": str(max(self.calls - count, 0)),
            "X-RateLimit-Reset": str(reset_at),
        }

        if count > self.calls:
            logger.info(f"Rate limit exceeded for {key}")
            return JSONResponse(
                status_code=status.HTTP_429_TOO_MANY_REQUESTS,
                content={"detail": f"Rate limit exceeded. Try again in {window_left} seconds."},
                headers=headers,
            )

        response = await call_next(request)
        response.headers.update(headers)
        return response
