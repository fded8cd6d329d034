"""Application configuration using Pydantic Settings."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Card element library configuration.

    Values come from ``CARD_ELEMENTS_*`` environment variables or the
    ``.env`` file at the repository root.
    """

    # Logging
    log_level: str = "INFO"
    log_path: str = Field(
        default="",
        description="Directory for dated log files. Empty keeps logging console-only",
    )
    max_log_message_length: int = Field(
        default=3000,
        description="Log messages longer than this are truncated with '...'",
    )

    # Element construction
    strict_validation: bool = Field(
        default=True,
        description="When enabled, builder input is validated and bad enum values or missing "
        "required fields raise instead of passing through to the renderer",
    )
    emoji_language: str = Field(
        default="alias",
        description="Shortcode dialect used by the default emoji converter ('alias' or 'en')",
    )

    model_config = SettingsConfigDict(
        env_prefix="CARD_ELEMENTS_",
        env_file=str(Path(__file__).parent.parent / ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


# Global settings instance
settings = Settings()
