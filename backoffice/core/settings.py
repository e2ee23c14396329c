"""
Configurazione applicativa per E-commerce Back Office API
"""

from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """Application configuration settings"""

    # Application
    app_name: str = Field(default="E-commerce Back Office API")
    environment: str = Field(default="production", pattern="^(development|production|test)$")

    # Server
    host: str = Field(default="localhost", min_length=1)
    port: int = Field(default=8080, gt=0)
    cors_origins: List[str] = Field(default=["http://localhost:8080"])

    # Database
    database_url: str = Field(default="sqlite:///./backoffice.db", min_length=1)
    database_echo: bool = Field(default=False)

    # Logging
    log_level: str = Field(default="INFO")
    slow_request_threshold: float = Field(default=1.0, gt=0)  # seconds

    # CSV import
    max_upload_size_bytes: int = Field(default=10 * 1024 * 1024, gt=0)  # 10MB
    import_transaction_timeout_seconds: float = Field(default=30.0, gt=0)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",  # Ignore extra environment variables
    )

    @property
    def is_development(self) -> bool:
        return self.environment == "development"


@lru_cache()
def get_settings() -> AppSettings:
    """Get cached application settings instance"""
    return AppSettings()
