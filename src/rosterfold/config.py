import os
from typing import Literal, Mapping, Optional
from pydantic import BaseModel, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

ENV_PREFIX = "ROSTERFOLD_"


class Settings(BaseModel):
    LOG_LEVEL: LogLevel = "INFO"
    LOG_FORMAT: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    LOG_DATEFMT: str = "%Y-%m-%d %H:%M:%S"

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _normalize_level(cls, value):
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @classmethod
    def load(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from ``ROSTERFOLD_*`` environment variables.

        Args:
            environ: Mapping to read instead of ``os.environ``.

        Returns:
            Settings with unset variables left at their defaults.
        """
        environ = os.environ if environ is None else environ

        values = {}
        for name in cls.model_fields:
            raw = environ.get(ENV_PREFIX + name)
            if raw:
                values[name] = raw

        return cls(**values)


settings = Settings.load()
