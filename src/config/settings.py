"""
Configuration settings using Pydantic Settings.

Only ambient concerns (logging, display text, history-check sizing) are
configurable. Scoring constants live in src.core.scoring and are fixed.
"""

from pydantic import AliasChoices, Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Ensure .env values take precedence over system environment variables.
    # Order: init kwargs > .env (dotenv) > env vars > file secrets
    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ):
        return (
            init_settings,
            dotenv_settings,
            env_settings,
            file_secret_settings,
        )

    # Application Configuration
    app_name: str = Field("impact-scorer", alias="APP_NAME")
    app_env: str = Field("development", alias="APP_ENV")
    app_log_level: str = Field(
        "INFO", validation_alias=AliasChoices("APP_LOG_LEVEL", "LOG_LEVEL")
    )
    log_json: bool = Field(
        False,
        alias="LOG_JSON",
        description="Force JSON log lines even when attached to a terminal",
    )

    # Match summary display
    rank_placeholder: str = Field("Feature coming soon \U0001F440", alias="RANK_PLACEHOLDER")

    # Stored-history refresh: how many upstream match ids to compare against
    stored_match_check_floor: int = Field(20, ge=1, alias="STORED_MATCH_CHECK_FLOOR")
    stored_match_check_margin: int = Field(5, ge=0, alias="STORED_MATCH_CHECK_MARGIN")

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.app_env == "development"


# Global settings instance - loaded from environment / .env
settings = Settings()  # type: ignore[call-arg]


def get_settings() -> Settings:
    """Get the global settings instance.

    This function provides dependency injection support for settings.
    """
    return settings
