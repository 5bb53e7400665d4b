"""Application configuration using Pydantic Settings."""

from functools import lru_cache
from typing import List, Optional, Union
from pydantic import model_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""

    # Remote inspection service
    inspection_api_url: str = "http://localhost:8080"
    http_timeout_seconds: Optional[float] = None

    # Application
    debug: bool = True
    log_level: str = "INFO"
    api_prefix: str = "/api/v1"
    max_photo_bytes: int = 15 * 1024 * 1024

    # CORS
    allowed_origins: Union[str, List[str]] = "http://localhost:3000,http://localhost:5173"
    allowed_methods: Union[str, List[str]] = "GET,POST,PUT,PATCH,DELETE,OPTIONS"
    allowed_headers: Union[str, List[str]] = "*"

    @model_validator(mode='after')
    def convert_cors_lists(self):
        """Convert comma-separated strings to lists."""
        if isinstance(self.allowed_origins, str):
            self.allowed_origins = [item.strip() for item in self.allowed_origins.split(",") if item.strip()]
        if isinstance(self.allowed_methods, str):
            self.allowed_methods = [item.strip() for item in self.allowed_methods.split(",") if item.strip()]
        if isinstance(self.allowed_headers, str):
            self.allowed_headers = [item.strip() for item in self.allowed_headers.split(",") if item.strip()]
        return self

    class Config:
        """Pydantic config."""
        env_file = ".env"
        case_sensitive = False
        env_ignore_empty = True


@lru_cache()
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
