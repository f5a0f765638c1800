"""
HTTP middlewares package.
"""
from gallery_api.middlewares.logging_middleware import LoggingMiddleware
from gallery_api.middlewares.rate_limit_middleware import (
    get_rate_limit_decorator,
    limiter,
    setup_rate_limit_exception_handler,
)
from gallery_api.middlewares.request_tracking_middleware import (
    RequestTrackingMiddleware,
    get_request_tracker,
)

__all__ = [
    "LoggingMiddleware",
    "RequestTrackingMiddleware",
    "get_rate_limit_decorator",
    "get_request_tracker",
    "limiter",
    "setup_rate_limit_exception_handler",
]
