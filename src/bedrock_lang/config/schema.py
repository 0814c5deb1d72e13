"""
Pydantic models for bedrock_lang configuration.
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from ..loading.locales import is_minecraft_locale


class LoggingConfig(BaseModel):
    """Logging system configuration."""

    level: Literal["debug", "info", "warn", "error"] = "info"
    file: Path | None = None
    json_output: bool = False

    model_config = {"extra": "forbid"}


class LangConfig(BaseModel):
    """Root configuration: where language files live and how to load them."""

    directory: Path = Field(
        default=Path("lang"),
        description="Directory holding <locale>.json / <locale>.yml files",
    )
    default_locale: str | None = Field(
        default=None,
        description="Fallback locale. None = first file loaded becomes the default.",
    )
    strict: bool = Field(
        default=True,
        description="If True, one broken language file aborts loading; otherwise it is skipped",
    )
    validate_locales: bool = Field(
        default=True,
        description="Reject files whose name is not an official Minecraft Bedrock locale",
    )
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {"extra": "forbid"}

    @field_validator("default_locale")
    @classmethod
    def _check_default_locale(cls, v: str | None) -> str | None:
        if v is not None and not is_minecraft_locale(v):
            raise ValueError(f"'{v}' is not a valid Minecraft locale")
        return v
