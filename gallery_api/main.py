"""
FastAPI Client Gallery API Application.

Main application entry point that configures:
- CORS middleware
- API routers (mounted under /api)
- Entity store lifecycle
- Logging system
- Exception handlers ({success, error} envelope)
- Prometheus metrics (스크래핑 + 선택적 Pushgateway)
- Graceful shutdown
"""
import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from gallery_api.config import get_settings
from gallery_api.exceptions import GalleryError
from gallery_api.middlewares.logging_middleware import LoggingMiddleware
from gallery_api.middlewares.rate_limit_middleware import limiter, setup_rate_limit_exception_handler
from gallery_api.middlewares.request_tracking_middleware import (
    RequestTrackingMiddleware,
    get_request_tracker,
)
from gallery_api.routers import (
    auth_router,
    comments_router,
    gallery_router,
    health_router,
    projects_router,
)
from gallery_api.schemas.common import ErrorResponse
from gallery_api.store import build_store
from gallery_api.utils.logger import get_request_id, log_error, log_info, log_warning, setup_logging
from gallery_api.utils.prometheus_metrics import (
    exceptions_total,
    pushgateway_loop,
    ready,
    setup_prometheus,
)

settings = get_settings()
logger = logging.getLogger("gallery_api")

# Python logging 설정
setup_logging()

# 종료 시 진행 중 요청 최대 대기 시간 (초)
SHUTDOWN_GRACE_SECONDS = 30.0


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """
    Application lifespan with graceful shutdown.

    Graceful shutdown 흐름:
    1. Health check 즉시 실패 (ready=0)
    2. 로드밸런서가 새 요청 차단
    3. 진행 중인 요청 완료 대기 (최대 30초)
    4. 백그라운드 작업 종료
    """
    # 설정 검증 (프로덕션 환경에서만)
    if settings.is_production:
        from gallery_api.utils.config_validator import validate_all_config
        config_ok, config_errors = await validate_all_config()
        if not config_ok:
            error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in config_errors)
            log_error(
                "Startup failed: configuration validation errors",
                error_message=error_msg,
                event="lifecycle",
            )
            raise RuntimeError(error_msg)
        log_info("Configuration validation passed", event="lifecycle")

    # 테스트 등에서 미리 주입한 저장소는 유지
    if getattr(app.state, "store", None) is None:
        app.state.store = build_store(seed=settings.seed_demo_data)

    ready.set(1)
    log_info(
        "Application startup completed",
        event="lifecycle",
        version=settings.app_version,
        environment=settings.environment.value,
        seed_demo_data=settings.seed_demo_data,
    )

    # Pushgateway 연동: PROMETHEUS_PUSHGATEWAY_URL 설정 시 백그라운드에서 주기 푸시
    pushgateway_task = asyncio.create_task(pushgateway_loop())

    yield

    # Graceful shutdown
    ready.set(0)
    log_info("Application shutdown initiated", event="lifecycle")

    tracker = get_request_tracker()
    if tracker is not None:
        await tracker.wait_for_requests(timeout=SHUTDOWN_GRACE_SECONDS)

    pushgateway_task.cancel()
    try:
        await pushgateway_task
    except asyncio.CancelledError:
        pass

    log_info("Graceful shutdown completed", event="lifecycle")


# Create FastAPI application
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="""
## Client Gallery API

Photographers share galleries with clients through a share link.

### Features
- **Projects**: Projects, folders and photo registration for photographers
- **Gallery**: Public share-token access with folder and status filters
- **Selections**: Clients select, reject or reset photos (one at a time or in bulk)
- **Comments**: Threaded comments per photo (one reply level)

### Authentication
Project and comment-writing endpoints require a Bearer token.
Use `/api/auth/login` to get one.
    """,
    openapi_tags=[
        {"name": "Authentication", "description": "Signup, login and logout"},
        {"name": "Projects", "description": "Photographer project management"},
        {"name": "Gallery", "description": "Public share-token gallery and selections"},
        {"name": "Comments", "description": "Photo comment threads"},
        {"name": "Health", "description": "Health and readiness probes"},
    ],
    lifespan=lifespan,
)

# slowapi 는 app.state.limiter 를 참조
app.state.limiter = limiter

# Prometheus: FastAPI metrics + node info at /metrics
setup_prometheus(app)

# Rate limiting: 예외 처리 핸들러 등록
setup_rate_limit_exception_handler(app)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Add structured logging middleware
app.add_middleware(LoggingMiddleware)
# 진행 중인 요청 추적: Graceful shutdown을 위한 요청 카운트
app.add_middleware(RequestTrackingMiddleware)


def _error_response(status_code: int, error: str, message: str = None, headers=None) -> JSONResponse:
    content = ErrorResponse(error=error, message=message or None).to_content()
    return JSONResponse(status_code=status_code, content=content, headers=headers)


@app.exception_handler(GalleryError)
async def gallery_error_handler(request: Request, exc: GalleryError):
    """Translate service-layer errors into the error envelope."""
    headers = None
    if exc.status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}
    return _error_response(exc.status_code, exc.message, headers=headers)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Malformed body/query/path values are reported as 400."""
    details = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
        details.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))

    log_warning(
        "Request validation failed",
        event="validation",
        http_method=request.method,
        http_path=request.url.path,
        errors="; ".join(details),
    )
    return _error_response(
        status.HTTP_400_BAD_REQUEST,
        "Invalid request data",
        message="; ".join(details),
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Framework HTTP errors (unknown route, 503 from probes, ...) in the envelope."""
    return _error_response(
        exc.status_code,
        exc.detail if isinstance(exc.detail, str) else "Request failed",
        headers=getattr(exc, "headers", None),
    )


# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """
    Unhandled exception handler with structured logging.

    - ERROR 로그 남김 (구조화된 포맷)
    - 500 응답 반환, 내부 정보는 노출하지 않음
    - Request ID 포함 (장애 추적용)
    """
    exceptions_total.inc()
    rid = get_request_id()

    log_error(
        "Unhandled exception occurred",
        error_type=type(exc).__name__,
        error_message=str(exc),
        error_code="INTERNAL_SERVER_ERROR",
        http_method=request.method,
        http_path=request.url.path,
        request_id=rid,
        event="exception",
        exc_info=True,
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse(error="Internal server error", request_id=rid).to_content(),
    )


# Include routers
app.include_router(health_router)
app.include_router(auth_router, prefix="/api")
app.include_router(projects_router, prefix="/api")
app.include_router(gallery_router, prefix="/api")
app.include_router(comments_router, prefix="/api")


# Root endpoint
@app.get(
    "/",
    tags=["Root"],
    summary="API information",
)
async def root():
    """
    Root endpoint with API information.
    """
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs",
    }
