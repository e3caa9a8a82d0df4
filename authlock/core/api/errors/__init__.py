"""Authentication API errors and exceptions."""
from .api_errors import AuthenticationError, AuthErrorCodes

__all__ = [
    'AuthenticationError',
    'AuthErrorCodes',
]
