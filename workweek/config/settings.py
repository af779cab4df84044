from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from workweek.core.domain.work_week import PreAnchorPolicy


class Settings(BaseSettings):
    pre_anchor_policy: PreAnchorPolicy = Field(
        default=PreAnchorPolicy.ZERO,
        validation_alias="WORKWEEK_PRE_ANCHOR_POLICY",
    )
    log_level: str = Field(default="WARNING", validation_alias="WORKWEEK_LOG_LEVEL")

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate that log level is one of the standard logging levels."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        level = value.upper()
        if level not in valid_levels:
            raise ValueError(f"Invalid log level: {value}. Must be one of {sorted(valid_levels)}")
        return level


def load_settings() -> Settings:
    """Read settings from the environment (and .env) on every call."""
    return Settings()
