"""Configuration management for bucket-lister."""

from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    log_level: str = "INFO"
    otel_enabled: bool = False
    otel_service_name: str = "bucket-lister"

    # Listing target
    bucket_name: str = "bucket-name"
    prefix: str = ""
    default_limit: int = 10

    # HTTP surface
    base_url: str = "http://localhost:8080"
    host: str = "0.0.0.0"
    port: int = 8080

    # Credential source
    access_key_id: Optional[str] = None
    secret_access_key: Optional[str] = None
    session_token: Optional[str] = None
    region_name: str = "us-east-1"
    endpoint_url: Optional[str] = None
    aws_profile: Optional[str] = None

    model_config = {
        "env_prefix": "BUCKET_LISTER_",
        "case_sensitive": False,
    }


settings = Settings()
