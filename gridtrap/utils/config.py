from decimal import Decimal
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings, read from GRIDTRAP_* environment variables or .env"""

    model_config = SettingsConfigDict(
        env_prefix="GRIDTRAP_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging Configuration
    log_level: str = Field(default="INFO")
    log_file: Optional[str] = Field(default=None, description="Rotating log file; console only when unset")

    # Paper trading
    commission: Decimal = Field(default=Decimal("0"), ge=0, lt=1, description="Fee rate taken from each paper fill")

    # Persistence
    state_dir: str = Field(default="state")


# Global settings instance
settings = Settings()
