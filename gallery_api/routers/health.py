"""
Health Check 라우터.

애플리케이션의 상태를 확인하는 엔드포인트를 제공합니다.
"""
import logging
import time
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, status

from gallery_api.config import get_settings
from gallery_api.store import EntityStore, get_store
from gallery_api.utils.prometheus_metrics import REGISTRY, Gauge, ready

logger = logging.getLogger("gallery_api.health")
router = APIRouter(prefix="/health", tags=["Health"])

settings = get_settings()

# Health check 상태 메트릭
health_check_status = Gauge(
    "gallery_api_health_check_status",
    "Health check status (1=healthy, 0=unhealthy)",
    ["check_type"],
    registry=REGISTRY,
)


def _is_ready() -> bool:
    return ready._value.get() == 1


@router.get(
    "",
    summary="Health check",
)
async def health_check(store: EntityStore = Depends(get_store)) -> Dict[str, Any]:
    """
    Health Check (로드밸런서/모니터링용).

    - 종료 중이면 503
    - 저장소 레코드 수 포함
    """
    start_time = time.perf_counter()

    if not _is_ready():
        health_check_status.labels(check_type="fast").set(0)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Application is shutting down",
        )

    health_check_status.labels(check_type="fast").set(1)
    return {
        "status": "healthy",
        "version": settings.app_version,
        "store": store.stats(),
        "duration_ms": round((time.perf_counter() - start_time) * 1000, 2),
        "instance": settings.instance_ip or "unknown",
    }


@router.get(
    "/liveness",
    summary="Liveness probe (Kubernetes)",
)
async def liveness_probe() -> Dict[str, str]:
    """
    Liveness Probe. 프로세스가 살아있는지만 확인합니다.
    """
    if not _is_ready():
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Application is shutting down",
        )
    return {"status": "alive"}


@router.get(
    "/readiness",
    summary="Readiness probe (Kubernetes)",
)
async def readiness_probe() -> Dict[str, str]:
    """
    Readiness Probe. 요청을 처리할 준비가 되었는지 확인합니다.
    """
    if not _is_ready():
        logger.warning("Readiness check failed: not ready", extra={"event": "health"})
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Application is not ready",
        )
    return {"status": "ready"}
