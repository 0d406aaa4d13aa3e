from fastapi import Request
from pydantic_settings import BaseSettings
from pydantic import Field
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings."""

    # Database
    database_url: str = Field(default="sqlite+aiosqlite:///./doctor_portal.db")
    database_echo: bool = Field(default=False)

    # JWT
    secret_token: str = Field(...)
    token_expire_seconds: int = Field(default=3600)

    # Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=5000)

    # Logging
    log_level: str = Field(default="INFO")
    log_json: bool = Field(default=True)

    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def app_settings(request: Request) -> Settings:
    """FastAPI dependency: the settings the running app was built with."""
    return request.app.state.settings
