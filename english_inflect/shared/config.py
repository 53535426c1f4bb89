# english_inflect/shared/config.py
from enum import Enum
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from english_inflect.core.domain.models import ClassicalFlags


class LogFormat(str, Enum):
    CONSOLE = "console"
    JSON = "json"


class Settings(BaseSettings):
    """
    Library configuration, read from INFLECT_* environment variables
    (or a local .env file).
    """

    # --- Logging ---
    LOG_LEVEL: str = "WARNING"
    LOG_FORMAT: LogFormat = LogFormat.CONSOLE

    # --- Classical mode for the process-wide default engine ---
    CLASSICAL_ALL: bool = False

    # Per-flag overrides, applied on top of CLASSICAL_ALL when set.
    CLASSICAL_ANCIENT: Optional[bool] = None
    CLASSICAL_PERSONS: Optional[bool] = None
    CLASSICAL_NAMES: Optional[bool] = None
    CLASSICAL_HERD: Optional[bool] = None
    CLASSICAL_ZERO: Optional[bool] = None

    model_config = SettingsConfigDict(
        env_prefix="INFLECT_",
        env_file=".env",
        extra="ignore",
    )

    def initial_classical_flags(self) -> ClassicalFlags:
        """Flags the default engine starts with."""
        flags = ClassicalFlags.everything(self.CLASSICAL_ALL)
        overrides = {
            "ancient": self.CLASSICAL_ANCIENT,
            "persons": self.CLASSICAL_PERSONS,
            "names": self.CLASSICAL_NAMES,
            "herd": self.CLASSICAL_HERD,
            "zero": self.CLASSICAL_ZERO,
        }
        update = {name: value for name, value in overrides.items() if value is not None}
        if update:
            flags = flags.model_copy(update=update)
        return flags


settings = Settings()
