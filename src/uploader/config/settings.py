# src/uploader/config/settings.py
import logging
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_LISTEN_HOST = "0.0.0.0"
DEFAULT_LISTEN_PORT = "1323"
DEFAULT_STORE_DIR = "files"


class Settings(BaseSettings):
    """
    Single source of truth for the uploader configuration.

    Configuration precedence:
    1. Explicit keyword arguments (the CLI passes its flags this way)
    2. Environment variables prefixed with ``UPLOADER_``
    3. .env file (if exists)
    4. Default values in this class

    Instances are frozen: build one at startup and hand it to ``create_app``.
    """

    store_dir: Path = Field(
        default=Path(DEFAULT_STORE_DIR),
        description="Directory where uploads are stored and listed from",
    )

    embed_assets: bool = Field(
        default=True,
        description="Serve templates and static files bundled with the package; "
        "when false they are read from tpl/ and static/ in the working directory",
    )

    listen_host: str = Field(
        default=DEFAULT_LISTEN_HOST,
        description="Host or IP address to bind",
    )

    listen_port: str = Field(
        default=DEFAULT_LISTEN_PORT,
        description="TCP port to bind",
    )

    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )

    @field_validator("listen_host")
    @classmethod
    def default_empty_host(cls, v: str) -> str:
        """An empty host means every interface."""
        return v.strip() or DEFAULT_LISTEN_HOST

    @field_validator("listen_port")
    @classmethod
    def validate_listen_port(cls, v: str) -> str:
        v = v.strip()
        if not v.isdigit() or int(v) > 65535:
            raise ValueError(f"Invalid listen_port: {v!r}. Must be a number between 0 and 65535")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Invalid log_level: {v}")
        return level

    @property
    def listen_address(self) -> str:
        """host:port, with IPv6 hosts in brackets."""
        if ":" in self.listen_host:
            return f"[{self.listen_host}]:{self.listen_port}"
        return f"{self.listen_host}:{self.listen_port}"

    model_config = SettingsConfigDict(
        env_prefix="UPLOADER_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )
