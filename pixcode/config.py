"""Application configuration utilities."""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingConfig(BaseModel):
    level: str = Field(default="INFO", description="Root logger level")
    json_logs: bool = Field(default=True, description="Enable JSON formatted logs")


class QRConfig(BaseModel):
    default_size: int = Field(default=256, ge=21, description="Image side in pixels when no size is requested")
    box_size: int = Field(default=10, ge=1, description="Pixels per module before resizing")
    border: int = Field(default=4, ge=0, description="Quiet zone width in modules")


class Settings(BaseSettings):
    """Settings for the rendering and HTTP layers; the encoder itself reads none of them."""

    model_config = SettingsConfigDict(
        env_file=(Path(__file__).resolve().parent.parent / ".env"),
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )

    app_name: str = Field(default="pixcode")
    environment: Literal["development", "staging", "production"] = Field(default="development")
    api_key: str = Field(default="dev-secret-key")
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    qr: QRConfig = Field(default_factory=QRConfig)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return memoized application settings."""

    return Settings()


settings = get_settings()
