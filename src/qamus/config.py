"""
Configuration model for the qamus lookup server.
"""

import logging
import os
from pathlib import Path

from pydantic import BaseModel, Field, field_validator


class QamusConfig(BaseModel):
    """Runtime settings for the lookup engine and translator session.

    Defaults reproduce the behaviour of the original translator: a 300ms
    typing debounce, five suggestions and ten history entries.
    """

    dictionary_path: Path | None = Field(
        default=None,
        description="JSON/YAML dictionary file; None uses the bundled dictionary"
    )
    debounce_seconds: float = Field(
        default=0.3,
        gt=0.0,
        le=10.0,
        description="Quiet period after the last keystroke before translating"
    )
    max_suggestions: int = Field(
        default=5,
        ge=1,
        le=50,
        description="Maximum number of autocomplete suggestions"
    )
    history_limit: int = Field(
        default=10,
        ge=1,
        le=100,
        description="Number of recent translations kept in history"
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level name (DEBUG, INFO, WARNING, ...)"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure the level is one the logging module knows."""
        level = v.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(
                f"log_level must be one of: {', '.join(sorted(logging.getLevelNamesMapping()))}"
            )
        return level

    @field_validator("debounce_seconds", mode="before")
    @classmethod
    def validate_debounce_seconds(cls, v: float | str) -> float | str:
        """Accept millisecond strings such as "300ms" alongside plain seconds."""
        if isinstance(v, str) and v.strip().lower().endswith("ms"):
            milliseconds = v.strip()[:-2]
            try:
                return float(milliseconds) / 1000.0
            except ValueError:
                raise ValueError(f"debounce must be a number of milliseconds, got '{milliseconds}'")
        return v

    @field_validator("dictionary_path", mode="before")
    @classmethod
    def validate_dictionary_path(cls, v: str | Path | None) -> Path | None:
        """Treat an empty string as 'not configured'."""
        if v is None or (isinstance(v, str) and not v.strip()):
            return None
        return Path(v).expanduser()

    @classmethod
    def from_env(cls) -> "QamusConfig":
        """Build a config from QAMUS_* environment variables.

        Unset variables fall back to the field defaults. The debounce is read
        in milliseconds (QAMUS_DEBOUNCE_MS) to match how it is usually quoted.

        Raises:
            ValidationError: If a variable holds an invalid value
        """
        values: dict[str, object] = {}
        if path := os.getenv("QAMUS_DICTIONARY_PATH"):
            values["dictionary_path"] = path
        if debounce_ms := os.getenv("QAMUS_DEBOUNCE_MS"):
            values["debounce_seconds"] = f"{debounce_ms}ms"
        if max_suggestions := os.getenv("QAMUS_MAX_SUGGESTIONS"):
            values["max_suggestions"] = max_suggestions
        if history_limit := os.getenv("QAMUS_HISTORY_LIMIT"):
            values["history_limit"] = history_limit
        if log_level := os.getenv("QAMUS_LOG_LEVEL"):
            values["log_level"] = log_level
        return cls(**values)


__all__ = ["QamusConfig"]
