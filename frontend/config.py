from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    service_name: str = "frontend"
    version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"
    log_format: str = "json"

    gateway_url: str = "http://api-gateway:8000"
    request_timeout: float = 10.0
    port: int = 3000

    model_config = SettingsConfigDict(
        env_prefix="FRONTEND_",
        env_file=".env",
        extra="ignore",
        case_sensitive=False
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
