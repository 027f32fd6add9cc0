"""Async client for IBM Cloud IAM authentication and Watson services."""

from .auth import AuthenticationError, IamAuthenticator, TokenResponse
from .config import Settings, SettingsManager
from .errors import ErrorKind, StatusClassifier, StatusRule, WatsonError

__all__ = [
    "AuthenticationError",
    "ErrorKind",
    "IamAuthenticator",
    "Settings",
    "SettingsManager",
    "StatusClassifier",
    "StatusRule",
    "TokenResponse",
    "WatsonError",
]

__version__ = "0.1.0"
