from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

LogFormat = Literal["json", "console"]
UnknownOptionsPolicy = Literal["reject", "ignore"]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="EMBEDKV_",
        env_file=".env",
        extra="ignore",
    )

    log_level: str = Field(default="INFO")
    log_format: LogFormat = Field(default="console")

    # What the resolver does with option names it does not recognize.
    unknown_options: UnknownOptionsPolicy = Field(default="reject")


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    return Settings()
