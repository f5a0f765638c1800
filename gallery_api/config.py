"""
Application configuration using Pydantic Settings.
Manages all environment variables and settings.
"""
from enum import Enum
from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings
from pydantic import Field, field_validator, model_validator


DEFAULT_JWT_SECRET = "jwt-secret-change-in-production"


class Environment(str, Enum):
    """Application environment modes."""
    DEV = "DEV"
    PRODUCTION = "PRODUCTION"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Environment
    environment: Environment = Field(
        default=Environment.DEV,
        description="Application environment: DEV or PRODUCTION"
    )

    # Application
    app_name: str = Field(default="Client Gallery API")
    app_version: str = Field(default="1.0.0")
    debug: bool = Field(default=False)

    @model_validator(mode='after')
    def set_debug_from_environment(self):
        """Set debug mode based on environment if not explicitly set via environment variable."""
        # DEBUG 환경 변수가 명시적으로 설정되지 않은 경우에만 환경 모드에 따라 설정
        import os
        if 'DEBUG' not in os.environ:
            self.debug = self.environment == Environment.DEV
        return self

    @property
    def is_dev(self) -> bool:
        """Check if running in development mode."""
        return self.environment == Environment.DEV

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.environment == Environment.PRODUCTION

    # JWT
    jwt_secret_key: str = Field(default=DEFAULT_JWT_SECRET)
    jwt_algorithm: str = Field(default="HS256")
    access_token_expire_minutes: int = Field(default=60 * 24)

    # CORS (쉼표 구분)
    cors_allow_origins: str = Field(default="*")

    @property
    def cors_origins(self) -> List[str]:
        """Parsed CORS origin list."""
        return [origin.strip() for origin in self.cors_allow_origins.split(",") if origin.strip()]

    # Rate limiting (공개 갤러리 링크 보호)
    rate_limit_enabled: bool = Field(default=True)
    rate_limit_per_minute: int = Field(default=120)
    rate_limit_gallery_per_minute: int = Field(default=60)

    # Gallery
    seed_demo_data: bool = Field(
        default=True,
        description="Load the demo photographer/client/project dataset on startup",
    )
    guest_client_id: str = Field(
        default="guest",
        description="Client id recorded on selections made without a bearer token",
    )

    # Logging. 비우면 파일 로그 비활성화 (stdout/stderr만 사용)
    log_dir: str = Field(default="/var/log/gallery-api")

    # Prometheus (Observability)
    node_name: str = Field(default="", description="Node/Pod identifier for Prometheus labels")
    region: str = Field(default="", description="Deployment region label")
    prometheus_pushgateway_url: str = Field(
        default="",
        description="Prometheus Pushgateway URL (e.g. http://pushgateway:9091). 비우면 푸시 안 함.",
    )
    prometheus_push_interval_seconds: int = Field(
        default=30,
        description="Pushgateway로 메트릭 전송 주기(초). prometheus_pushgateway_url 설정 시에만 사용.",
    )

    @field_validator("prometheus_push_interval_seconds", mode="before")
    @classmethod
    def coerce_push_interval(cls, v: object) -> int:
        if v is None or v == "":
            return 30
        return int(v)

    # 인스턴스 식별용 사설 IP (로그·메트릭용). 비우면 hostname 사용
    instance_ip: str = Field(default="", description="서버 사설 IP (비우면 hostname)")

    class Config:
        # 환경변수만 사용 (.env 파일 미사용)
        env_file = None
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    Using lru_cache to avoid re-reading the environment on every request.
    """
    return Settings()
