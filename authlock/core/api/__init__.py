"""Authentication API module."""
from .errors import AuthenticationError, AuthErrorCodes
from .config import APIConfig, ProxyConfig, SSLConfig, TimeoutConfig, TelemetryConfig
from .request import AuthenticationRequest
from .async_client import AsyncAuthenticationClient

__all__ = [
    # Client
    'AsyncAuthenticationClient',
    'AuthenticationRequest',
    
    # Configuration
    'APIConfig',
    'ProxyConfig',
    'SSLConfig',
    'TimeoutConfig',
    'TelemetryConfig',
    
    # Errors
    'AuthenticationError',
    'AuthErrorCodes',
]
