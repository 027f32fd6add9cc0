"""Configuration helpers for watsonkit."""

from .settings import (
    DEFAULT_IAM_URL,
    DEFAULT_SERVICE_URL,
    Settings,
    SettingsManager,
)

__all__ = [
    "DEFAULT_IAM_URL",
    "DEFAULT_SERVICE_URL",
    "Settings",
    "SettingsManager",
]
