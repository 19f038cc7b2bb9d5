"""Configuration management using Pydantic Settings"""

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

RoundingMode = Literal[
    "ROUND_CEILING",
    "ROUND_DOWN",
    "ROUND_FLOOR",
    "ROUND_HALF_DOWN",
    "ROUND_HALF_EVEN",
    "ROUND_HALF_UP",
    "ROUND_UP",
    "ROUND_05UP",
]


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "payoff-projector"
    log_level: str = "INFO"

    # Currency rounding
    currency_decimal_places: int = 2
    rounding_mode: RoundingMode = "ROUND_HALF_EVEN"  # decimal module rounding constant

    # Projection limits
    max_projection_months: int = 1200  # 100 years
    max_accounts_per_request: int = 50


settings = Settings()
