"""Configuration management."""

from typing import Literal, Optional

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings pulled from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="PY_DRILLS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    log_format: Literal["console", "json"] = Field(
        default="console", description="Log renderer (console or json)"
    )

    # Randomness
    random_seed: Optional[int] = Field(
        default=None, ge=0, description="Fixed seed for the default random source"
    )

    # Guessing game
    guess_min: int = Field(default=1, description="Smallest number the game picks")
    guess_max: int = Field(default=100, description="Largest number the game picks")
    max_guesses: int = Field(default=10, ge=1, description="Guesses allowed per round")

    # Ball drop
    gravity: float = Field(default=9.8, gt=0, description="Gravitational acceleration (m/s^2)")
    drop_seconds: int = Field(default=6, ge=1, description="Number of seconds to report")

    @model_validator(mode="after")
    def _check_guess_range(self) -> "Settings":
        if self.guess_min > self.guess_max:
            raise ValueError(
                f"guess_min ({self.guess_min}) must not exceed guess_max ({self.guess_max})"
            )
        return self


settings = Settings()
