"""Configuration module for argon2-interop."""

from .logging import JSONFormatter, correlation_id, init_logging
from .settings import HasherSettings, SettingsValidationError, load_settings

__all__ = [
    "HasherSettings",
    "JSONFormatter",
    "SettingsValidationError",
    "correlation_id",
    "init_logging",
    "load_settings",
]
