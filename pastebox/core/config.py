from __future__ import annotations

import functools
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ByteSize, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from pastebox.paste.naming import RandomURLConfig
from pastebox.paste.writer import URL_DIR_NAME


class ServerConfig(BaseModel):
    """Transport-facing settings shared by every paste request."""

    max_content_length: ByteSize = Field(default=ByteSize(10_000_000))
    upload_path: Path = Field(default_factory=lambda: Path.cwd() / "upload")
    auth_token: Optional[str] = Field(default=None)


class PasteConfig(BaseModel):
    """Naming policy inputs: generator configuration and fallback extension."""

    random_url: RandomURLConfig = Field(default_factory=RandomURLConfig)
    default_extension: str = Field(default="txt")

    @field_validator("default_extension")
    @classmethod
    def _strip_leading_dot(cls, value: str) -> str:
        value = value.strip().lstrip(".")
        if not value:
            raise ValueError("default_extension must not be empty")
        return value


class AppSettings(BaseSettings):
    """Central application configuration loaded from env vars or .env."""

    app_name: str = Field(default="pastebox")
    server: ServerConfig = Field(default_factory=ServerConfig)
    paste: PasteConfig = Field(default_factory=PasteConfig)
    log_level: str = Field(default="INFO")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="PASTEBOX_",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def url_dir(self) -> Path:
        return self.server.upload_path / URL_DIR_NAME


@functools.lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    return AppSettings()


settings = get_settings()
