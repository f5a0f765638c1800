"""
Prometheus metrics for stability, availability and gallery activity.

- FastAPI: request count, latency (Instrumentator)
- Node/instance: app_info
- Stability: exceptions_total
- HA: ready gauge (1=up, 0=shutting down), in_flight_requests
- Business: gallery access, selections, comments, projects, logins
- Pushgateway: 선택 시 주기적으로 메트릭 푸시 (PROMETHEUS_PUSHGATEWAY_URL)
"""
import asyncio
import logging
import socket

from prometheus_client import REGISTRY, Counter, Gauge, Histogram, pushadd_to_gateway
from prometheus_fastapi_instrumentator import Instrumentator

from gallery_api.config import get_settings

logger = logging.getLogger(__name__)

# --- Stability ---
exceptions_total = Counter(
    "gallery_api_exceptions_total",
    "Total unhandled exceptions",
    registry=REGISTRY,
)

# --- HA ---
ready = Gauge(
    "gallery_api_ready",
    "Application ready (1=up, 0=shutting down)",
    registry=REGISTRY,
)

# 진행 중인 요청 수 (Graceful shutdown용)
in_flight_requests = Gauge(
    "gallery_api_in_flight_requests",
    "Number of requests currently being processed",
    registry=REGISTRY,
)

# --- Rate Limiting ---
rate_limit_hits_total = Counter(
    "gallery_api_rate_limit_hits_total",
    "Total number of rate limit hits (requests blocked)",
    ["endpoint"],
    registry=REGISTRY,
)

# --- Gallery Access Patterns ---
gallery_access_total = Counter(
    "gallery_api_gallery_access_total",
    "Total number of gallery (share token) access attempts",
    ["token_status", "result"],  # token_status: valid | invalid | not_shared, result: success | denied
    registry=REGISTRY,
)

gallery_access_duration_seconds = Histogram(
    "gallery_api_gallery_access_duration_seconds",
    "Gallery view assembly duration in seconds",
    ["result"],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0),
    registry=REGISTRY,
)

gallery_completions_total = Counter(
    "gallery_api_gallery_completions_total",
    "Total number of galleries marked complete by clients",
    registry=REGISTRY,
)

# --- Selections ---
selection_updates_total = Counter(
    "gallery_api_selection_updates_total",
    "Total number of single selection updates",
    ["status", "result"],  # status: selected | rejected | pending, result: success | failure
    registry=REGISTRY,
)

bulk_selection_items_total = Counter(
    "gallery_api_bulk_selection_items_total",
    "Total number of photos processed by bulk selection",
    ["status", "result"],
    registry=REGISTRY,
)

# --- Comments ---
comment_operations_total = Counter(
    "gallery_api_comment_operations_total",
    "Total number of comment operations",
    ["operation", "result"],  # operation: create | update | delete
    registry=REGISTRY,
)

# --- Projects ---
project_operations_total = Counter(
    "gallery_api_project_operations_total",
    "Total number of project/folder/photo management operations",
    ["operation", "result"],
    registry=REGISTRY,
)

# --- Auth ---
user_registration_total = Counter(
    "gallery_api_user_registration_total",
    "Total number of signup attempts",
    ["result"],
    registry=REGISTRY,
)

user_login_total = Counter(
    "gallery_api_user_login_total",
    "Total number of login attempts",
    ["result"],
    registry=REGISTRY,
)

login_duration_seconds = Histogram(
    "gallery_api_login_duration_seconds",
    "Login request duration in seconds",
    ["result"],
    buckets=(0.01, 0.05, 0.1, 0.2, 0.5, 1.0, 2.0),
    registry=REGISTRY,
)


def _node_identity() -> str:
    """Node/instance identifier: NODE_NAME env or hostname."""
    settings = get_settings()
    if settings.node_name:
        return settings.node_name
    try:
        return socket.gethostname()
    except OSError:
        return "unknown"


def push_metrics_to_gateway() -> None:
    """
    Push current registry to Prometheus Pushgateway.
    Called periodically when PROMETHEUS_PUSHGATEWAY_URL is set.
    """
    settings = get_settings()
    url = (settings.prometheus_pushgateway_url or "").strip()
    if not url:
        return
    grouping_key = {"instance": settings.instance_ip or _node_identity()}
    if (settings.region or "").strip():
        grouping_key["region"] = settings.region.strip()
    try:
        # pushadd_to_gateway uses POST; push_to_gateway uses PUT
        pushadd_to_gateway(url, job="gallery-api", registry=REGISTRY, grouping_key=grouping_key)
    except Exception as e:
        logger.warning("Pushgateway push failed: %s", e, exc_info=False)


async def pushgateway_loop() -> None:
    """
    Background loop: push metrics to Pushgateway at configured interval.
    Returns immediately when PROMETHEUS_PUSHGATEWAY_URL is not set.
    Push is run in thread pool to avoid blocking the event loop.
    """
    settings = get_settings()
    url = (settings.prometheus_pushgateway_url or "").strip()
    if not url:
        return
    interval = max(15, settings.prometheus_push_interval_seconds)
    logger.info(
        "Pushgateway enabled: url=%s interval=%ds",
        url,
        interval,
        extra={"event": "lifecycle"},
    )
    loop = asyncio.get_running_loop()
    while True:
        await asyncio.sleep(interval)
        await loop.run_in_executor(None, push_metrics_to_gateway)


def setup_prometheus(app) -> None:
    """
    Register Prometheus instrumentation.

    1. app_info gauge (node/app/version/environment/region labels).
    2. Instrumentator (FastAPI request metrics).
    3. /metrics 엔드포인트 노출 (스크래핑용).
    """
    settings = get_settings()

    app_info = Gauge(
        "gallery_api_app_info",
        "Application and node identity (labels only, value is 1)",
        ["node", "app", "version", "environment", "region"],
        registry=REGISTRY,
    )
    app_info.labels(
        node=_node_identity(),
        app=settings.app_name,
        version=settings.app_version,
        environment=settings.environment.value,
        region=(settings.region or "").strip() or "unknown",
    ).set(1)

    # status 라벨을 2xx/4xx 대신 구체 코드(200, 201, 404 등)로 노출
    Instrumentator(should_group_status_codes=False).instrument(app).expose(
        app, endpoint="/metrics", include_in_schema=False
    )
