"""
Server configuration, read from the environment (PHOSPHOR_* variables).
"""
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

Weight = Literal["thin", "light", "regular", "bold", "fill", "duotone"]

# Ordered from lightest to heaviest, with the two filled styles last
WEIGHTS = ("thin", "light", "regular", "bold", "fill", "duotone")

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class PhosphorSettings(BaseSettings):
    """Runtime settings for the Phosphor Icons server.

    Attributes:
        default_weight: Weight used when a request omits ``weight``
        log_level: Level for the stderr log handler
        batch_concurrency: Maximum concurrent fetches in get-multiple-icons
    """

    model_config = SettingsConfigDict(
        env_prefix="PHOSPHOR_", case_sensitive=False, extra="ignore"
    )

    default_weight: Weight = Field(
        default="regular", description="Default icon weight/style"
    )
    log_level: LogLevel = "WARNING"
    batch_concurrency: int = Field(default=8, ge=1)
