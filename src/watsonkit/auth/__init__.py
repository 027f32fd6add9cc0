"""IAM authentication for Watson services."""

from .authenticator import APIKEY_GRANT_TYPE, IamAuthenticator
from .errors import AUTHENTICATION_CLASSIFIER, AuthenticationError
from .types import TokenResponse

__all__ = [
    "APIKEY_GRANT_TYPE",
    "AUTHENTICATION_CLASSIFIER",
    "AuthenticationError",
    "IamAuthenticator",
    "TokenResponse",
]
