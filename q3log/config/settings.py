"""
Configuration settings for the Quake 3 Arena log parser.

Handles environment variables for logging, report defaults and
multi-file processing.
"""

import os
import codecs
import logging
from typing import Optional
from dataclasses import dataclass


VALID_VIEWS = ("standard", "by_kill_method")
VALID_LOG_LEVELS = ("debug", "info", "warning", "error", "critical")


def _int_from_env(name: str, default: Optional[int]) -> Optional[int]:
    """Read an integer environment variable, falling back to the default."""
    value = os.getenv(name)
    if value is None or value == "":
        return default
    try:
        return int(value)
    except ValueError:
        logging.getLogger(__name__).warning(f"Ignoring non-integer {name}={value!r}")
        return default


@dataclass
class ParserSettings:
    """Parser and report configuration settings."""

    log_level: str = "info"
    default_view: str = "standard"
    encoding: str = "utf-8"

    # Worker threads for multi-file processing (None = CPU count)
    workers: Optional[int] = None

    @classmethod
    def from_env(cls) -> "ParserSettings":
        """Load parser settings from environment variables."""
        return cls(
            log_level=os.getenv("Q3LOG_LOG_LEVEL", "info").lower(),
            default_view=os.getenv("Q3LOG_DEFAULT_VIEW", "standard").lower(),
            encoding=os.getenv("Q3LOG_ENCODING", "utf-8"),
            workers=_int_from_env("Q3LOG_WORKERS", None),
        )

    @property
    def logging_level(self) -> int:
        """Numeric logging level for the configured level name."""
        return getattr(logging, self.log_level.upper(), logging.INFO)

    def validate(self):
        """Validate configuration settings."""
        errors = []

        if self.log_level not in VALID_LOG_LEVELS:
            errors.append(f"Invalid log level: {self.log_level}")

        if self.default_view not in VALID_VIEWS:
            errors.append(f"Invalid default view: {self.default_view}")

        try:
            codecs.lookup(self.encoding)
        except LookupError:
            errors.append(f"Invalid encoding: {self.encoding}")

        if self.workers is not None and self.workers < 1:
            errors.append(f"Invalid worker count: {self.workers}")

        if errors:
            raise ValueError(f"Configuration validation failed: {'; '.join(errors)}")

    def log_configuration(self):
        """Log current configuration."""
        logger = logging.getLogger(__name__)

        logger.debug("=== Parser Configuration ===")
        logger.debug(f"Log Level: {self.log_level}")
        logger.debug(f"Default View: {self.default_view}")
        logger.debug(f"Encoding: {self.encoding}")
        logger.debug(f"Workers: {self.workers or 'auto'}")


# Global settings instance
settings = ParserSettings.from_env()


def get_settings() -> ParserSettings:
    """Get the global settings instance."""
    return settings


def reload_settings() -> ParserSettings:
    """Reload settings from environment variables."""
    global settings
    settings = ParserSettings.from_env()
    return settings
