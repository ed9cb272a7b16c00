from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables and CLI overrides."""

    model_config = SettingsConfigDict(env_prefix="B64MAP_", env_file=".env", extra="ignore")

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    debug: bool = False

    progress_every: int = Field(default=100, ge=0)
    read_chunk_size: int = Field(default=65536, gt=0)

    io_strategy: str = "sequential"
    line_ending: Literal["lf", "crlf"] = "lf"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.debug else self.log_level

    @property
    def line_terminator(self) -> bytes:
        return b"\r\n" if self.line_ending == "crlf" else b"\n"
