"""
설정 검증 유틸리티.

애플리케이션 시작 시 필수 설정을 검증합니다.
프로덕션 환경에서만 호출됩니다.
"""
import logging
from typing import List, Tuple

from gallery_api.config import DEFAULT_JWT_SECRET, Settings, get_settings

logger = logging.getLogger("gallery_api.config_validator")

_MIN_SECRET_LENGTH = 32


def _validate_auth_config(settings: Settings) -> List[str]:
    """JWT 설정 검증."""
    errors: List[str] = []
    secret = settings.jwt_secret_key or ""
    if secret == DEFAULT_JWT_SECRET:
        errors.append("JWT_SECRET_KEY must be changed from the default value")
    elif len(secret) < _MIN_SECRET_LENGTH:
        errors.append(f"JWT_SECRET_KEY must be at least {_MIN_SECRET_LENGTH} characters")
    if settings.access_token_expire_minutes <= 0:
        errors.append("ACCESS_TOKEN_EXPIRE_MINUTES must be positive")
    return errors


def _validate_gallery_config(settings: Settings) -> List[str]:
    """갤러리/레이트리밋 설정 검증."""
    errors: List[str] = []
    if settings.seed_demo_data:
        errors.append("SEED_DEMO_DATA must be disabled in production (demo accounts use known passwords)")
    if settings.rate_limit_enabled and settings.rate_limit_gallery_per_minute <= 0:
        errors.append("RATE_LIMIT_GALLERY_PER_MINUTE must be positive when rate limiting is enabled")
    if not (settings.guest_client_id or "").strip():
        errors.append("GUEST_CLIENT_ID must not be empty")
    return errors


async def validate_all_config() -> Tuple[bool, List[str]]:
    """
    모든 설정을 검증합니다.

    Returns:
        (검증 성공 여부, 에러 메시지 목록)
    """
    settings = get_settings()
    errors: List[str] = []
    errors.extend(_validate_auth_config(settings))
    errors.extend(_validate_gallery_config(settings))

    for error in errors:
        logger.error(error, extra={"event": "config"})

    return (not errors, errors)
