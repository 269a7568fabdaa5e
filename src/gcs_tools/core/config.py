"""Configuration management for gcs-tools."""

from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    log_level: str = "INFO"
    otel_enabled: bool = False
    otel_service_name: str = "gcs-tools"

    api_endpoint: str = "https://www.googleapis.com/storage/v1"
    upload_endpoint: str = "https://www.googleapis.com/upload/storage/v1"
    timeout: float = 30.0
    credentials_path: Optional[str] = None

    model_config = {
        "env_prefix": "GCS_TOOLS_",
        "case_sensitive": False,
    }


settings = Settings()
