"""Environment-driven settings.

The converter itself takes no configuration; settings here cover the ambient
runtime only (logging). Values come from ``OC_MONITORING_*`` environment
variables or a local ``.env`` file.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConverterSettings(BaseSettings):
    """Environment-driven settings and .env support.

    Attributes
    ----------
    log_level: str
        Logging level name (e.g., "DEBUG", "INFO"). Defaults to "INFO".
    """

    model_config = SettingsConfigDict(env_file=".env", env_prefix="OC_MONITORING_")

    log_level: str = Field("INFO", description="Logging level name")
