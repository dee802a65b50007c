"""Runtime configuration for the age_calculator package.

Settings are loaded in priority order:
  1. Environment variables (highest priority)
  2. .env file in the project root
  3. Field defaults

``MODEL_ARN`` is only needed by ``create_agent``; the date arithmetic and the
plain CLI report work without it.

Usage::

    from age_calculator.config import settings

    print(settings.log_format)
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        populate_by_name=True,
    )

    model_arn: str | None = Field(
        default=None,
        alias="MODEL_ARN",
        description="AWS Bedrock application inference profile ARN.",
    )
    log_format: str = Field(
        default="text",
        alias="LOG_FORMAT",
        description="'json' for structured logs, anything else for plaintext.",
    )
    log_level: str = Field(
        default="INFO",
        alias="LOG_LEVEL",
        description="Root logger level name.",
    )

    @field_validator("log_format", mode="before")
    @classmethod
    def _lowercase_log_format(cls, value: str) -> str:
        return value.lower() if isinstance(value, str) else value

    @field_validator("log_level", mode="before")
    @classmethod
    def _uppercase_log_level(cls, value: str) -> str:
        return value.upper() if isinstance(value, str) else value


settings = Settings()
