from pathlib import Path
from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from studyhub.domain.constants import (
    ACTIVITY_WINDOW_DAYS,
    DEFAULT_TARGET_CARDS_PER_DAY,
    DEFAULT_TARGET_MINUTES_PER_DAY,
    MAX_ACTIVITY_WINDOW_DAYS,
)


class AppConfig(BaseSettings):
    """
    Configuration model for studyhub.
    Supports loading from:
    1. Environment variables (STUDYHUB_*)
    2. Config file (~/.config/studyhub/config.toml)
    3. Manual overrides (CLI)
    """

    model_config = SettingsConfigDict(
        env_prefix="STUDYHUB_",
        extra="ignore",
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    verbose: int = 0

    # Goal defaults for users who never set one
    default_target_cards_per_day: int = Field(default=DEFAULT_TARGET_CARDS_PER_DAY, ge=0)
    default_target_minutes_per_day: int = Field(default=DEFAULT_TARGET_MINUTES_PER_DAY, ge=0)

    # Dashboard
    activity_window_days: int = Field(
        default=ACTIVITY_WINDOW_DAYS, ge=1, le=MAX_ACTIVITY_WINDOW_DAYS
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        from pydantic_settings import TomlConfigSettingsSource

        # First existing file wins; earlier sources take precedence
        toml_file = next((f for f in _config_files() if f.exists()), None)

        if toml_file:
            return (
                init_settings,
                env_settings,
                TomlConfigSettingsSource(settings_cls, toml_file=toml_file),
            )
        return (
            init_settings,
            env_settings,
        )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.upper()
        return v


def _config_files() -> list[Path]:
    # Re-evaluated on each call so a patched HOME is honoured.
    return [
        Path.home() / ".config/studyhub/config.toml",
        Path.home() / ".studyhub.toml",
    ]


def resolve_config(cli_overrides: dict[str, Any] | None = None) -> AppConfig:
    """
    Multi-layered configuration resolution.
    1. Defaults in AppConfig
    2. ~/.config/studyhub/config.toml (if exists)
    3. Environment variables (STUDYHUB_*)
    4. cli_overrides (passed from Typer)
    """
    overrides = {k: v for k, v in (cli_overrides or {}).items() if v is not None}
    config = AppConfig(**overrides)

    # -v and above switch to DEBUG
    if config.verbose >= 1 and "log_level" not in overrides:
        config.log_level = "DEBUG"

    return config
