"""Settings for the command line tool, read from ``ASYNCAPI_MODEL_*`` environment variables."""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class CodecSettings(BaseSettings):
    """Defaults used when writing documents; CLI options take precedence."""

    output_format: Literal["yaml", "json"] = "yaml"
    indent: int = Field(default=2, ge=0)
    log_level: str = "WARNING"

    model_config = SettingsConfigDict(
        env_prefix="ASYNCAPI_MODEL_",
        extra="ignore",
    )
