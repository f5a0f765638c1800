"""
Rate limiting using slowapi.
Protects the public share-token routes against token guessing and floods.
"""
import logging
from typing import Callable

from fastapi import Request, status
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded

from gallery_api.config import get_settings
from gallery_api.schemas.common import ErrorResponse
from gallery_api.utils.client_ip import get_client_ip
from gallery_api.utils.prometheus_metrics import rate_limit_hits_total

logger = logging.getLogger("gallery_api.rate_limit")
settings = get_settings()

# 클라이언트 IP 기준, 메모리 저장소 (다중 인스턴스에서는 Redis 필요)
limiter = Limiter(
    key_func=get_client_ip,
    enabled=settings.rate_limit_enabled,
    storage_uri="memory://",
)


def setup_rate_limit_exception_handler(app):
    """
    Rate limit 초과 시 예외 처리 핸들러 등록.
    """
    @app.exception_handler(RateLimitExceeded)
    async def rate_limit_handler(request: Request, exc: RateLimitExceeded):
        endpoint = request.scope.get("route").path if request.scope.get("route") else request.url.path

        rate_limit_hits_total.labels(endpoint=endpoint).inc()
        logger.warning(
            "Rate limit exceeded",
            extra={
                "event": "rate_limit",
                "client_ip": get_client_ip(request),
                "endpoint": endpoint,
                "limit": str(exc.detail),
            },
        )

        return JSONResponse(
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            content=ErrorResponse(
                error="Too many requests",
                message=f"Rate limit exceeded: {exc.detail}",
            ).to_content(),
        )


def get_rate_limit_decorator(limit: str):
    """
    Rate limit 데코레이터 생성 헬퍼.

    Args:
        limit: Rate limit 문자열 (예: "10/minute", "60/hour")

    Returns:
        Rate limit 데코레이터 (비활성화 시 그대로 반환)
    """
    if not settings.rate_limit_enabled:
        def noop_decorator(func: Callable) -> Callable:
            return func
        return noop_decorator

    return limiter.limit(limit)
