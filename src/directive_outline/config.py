"""Application configuration.

Configuration is loaded from environment variables. For local development, you can provide a
`.env` file and set `DIRECTIVE_OUTLINE_ENV_FILE` to point to it.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from directive_outline.models.outline import DocumentType


class Settings(BaseSettings):
    """directive-outline settings.

    All fields are environment-configurable. Prefix is `DIRECTIVE_OUTLINE_`.
    """

    model_config = SettingsConfigDict(
        env_prefix="DIRECTIVE_OUTLINE_",
        env_file=None,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = Field(default="WARNING")

    # Template used by `new` when no type is given
    document_type: DocumentType = Field(default="mco")

    # Files
    outline_path: Path = Field(default=Path("outline.json"))
    journal_path: Path | None = Field(default=None)

    # Text preview
    indent_width: int = Field(default=4, ge=0, le=16)


def load_settings() -> Settings:
    """Load settings from env.

    Returns:
        Settings: Parsed settings.
    """

    env_file_override = os.getenv("DIRECTIVE_OUTLINE_ENV_FILE")
    if env_file_override:
        return Settings(_env_file=Path(env_file_override))

    default_env = Path.cwd() / ".env"
    if default_env.exists():
        return Settings(_env_file=default_env)

    return Settings()
