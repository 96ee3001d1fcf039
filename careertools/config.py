"""Application configuration using Pydantic settings."""
from functools import lru_cache
from typing import List, Optional
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API Settings
    app_name: str = "Career Tools API"
    app_version: str = "1.0.0"
    debug: bool = False

    # Server Settings
    host: str = "0.0.0.0"
    port: int = 8000

    # CORS Settings
    cors_origins: List[str] = [
        "http://localhost:3000",
        "http://localhost:3001",
    ]
    cors_allow_credentials: bool = True
    cors_allow_methods: List[str] = ["*"]
    cors_allow_headers: List[str] = ["*"]

    # Analysis Settings
    taxonomy_path: Optional[str] = None  # YAML keyword taxonomy, built-in when unset
    max_text_length: int = 50000

    # Caching
    cache_ttl: int = 3600  # seconds

    # Redis Cache
    redis_url: str | None = None
    redis_tls: bool = False

    class Config:
        env_prefix = "CAREERTOOLS_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
