"""Centralised application settings loaded from environment / .env file."""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    # Presentation
    currency_symbol: str = "₹"  # INR
    currency_decimals: int = Field(2, ge=0, le=4)

    # Prompt default when the user leaves demand blank
    default_demand_level: int = Field(3, ge=1, le=5)

    # Logging
    log_level: LogLevel = "WARNING"

    model_config = {"env_file": ".env", "env_prefix": "RIDESHARE_", "extra": "ignore"}

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value


settings = Settings()
