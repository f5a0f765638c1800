"""
진행 중인 요청 추적 미들웨어.

Graceful shutdown 시 진행 중인 요청이 끝날 때까지 기다릴 수 있게 합니다.
"""
import asyncio
import logging
import time
from typing import Callable, Optional

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from gallery_api.utils.prometheus_metrics import in_flight_requests

logger = logging.getLogger("gallery_api.request_tracking")

# Health check 경로는 제외 (shutdown 시에도 체크 가능해야 함)
EXCLUDED_PATHS = {"/health", "/health/liveness", "/health/readiness"}

# lifespan 에서 접근할 수 있도록 생성된 인스턴스를 보관
_tracker: Optional["RequestTrackingMiddleware"] = None


def get_request_tracker() -> Optional["RequestTrackingMiddleware"]:
    """Middleware instance built by the app, or None before the first request."""
    return _tracker


class RequestTrackingMiddleware(BaseHTTPMiddleware):
    """
    진행 중인 요청 수를 추적하는 미들웨어.
    """

    def __init__(self, app):
        global _tracker
        super().__init__(app)
        self._lock = asyncio.Lock()
        self._request_count = 0
        _tracker = self

    @property
    def request_count(self) -> int:
        return self._request_count

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if request.url.path in EXCLUDED_PATHS:
            return await call_next(request)

        async with self._lock:
            self._request_count += 1
            in_flight_requests.set(self._request_count)

        try:
            return await call_next(request)
        finally:
            async with self._lock:
                self._request_count = max(self._request_count - 1, 0)
                in_flight_requests.set(self._request_count)

    async def wait_for_requests(self, timeout: float = 30.0) -> bool:
        """
        진행 중인 요청이 완료될 때까지 대기.

        Returns:
            True: 모든 요청 완료, False: 타임아웃
        """
        start_time = time.monotonic()

        while True:
            async with self._lock:
                count = self._request_count

            if count == 0:
                logger.info("All in-flight requests completed", extra={"event": "shutdown"})
                return True

            if time.monotonic() - start_time >= timeout:
                logger.warning(
                    f"Timeout waiting for requests (remaining: {count})",
                    extra={"event": "shutdown", "remaining_requests": count, "timeout": timeout},
                )
                return False

            await asyncio.sleep(0.5)
