from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # App config
    app_name: str = "API Gateway"
    service_name: str = "api-gateway"
    version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"
    log_format: str = "json"

    # Upstream
    store_service_url: str = "http://store-service:8001"

    # Connection pool settings (per worker)
    max_connections: int = 100
    max_keepalive: int = 20
    keepalive_expiry: float = 5.0

    # Timeout settings
    connect_timeout: float = 5.0
    read_timeout: float = 30.0
    write_timeout: float = 5.0
    pool_timeout: float = 30.0

    # CORS
    cors_origins: list[str] = ["*"]

    model_config = SettingsConfigDict(
        env_prefix="GATEWAY_",
        env_file=".env",
        extra="ignore",
        case_sensitive=False
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
