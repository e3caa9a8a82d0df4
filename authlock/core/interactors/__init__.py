"""Interactors driving authentication flows."""
from .database import DatabaseInteractor
from .protocols import Authentication, AuthenticationCallback, Request

__all__ = [
    'DatabaseInteractor',
    'Authentication',
    'AuthenticationCallback',
    'Request',
]
