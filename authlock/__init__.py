"""
authlock - credential interaction engine for database login and sign up.

Usage:
    >>> from authlock import (
    ...     APIConfig, AsyncAuthenticationClient, Connections,
    ...     CredentialAttribute, DatabaseInteractor
    ... )
    >>> 
    >>> async with AsyncAuthenticationClient(APIConfig.from_env()) as auth:
    ...     connections = Connections().add_database('Username-Password-Authentication')
    ...     interactor = DatabaseInteractor(connections, auth, on_authentication=print)
    ...     interactor.update(CredentialAttribute.EMAIL_OR_USERNAME, 'a@b.com')
    ...     interactor.update(CredentialAttribute.PASSWORD, 'secret')
    ...     error = await interactor.login()
"""
import logging

from .core import (
    AuthLockError,
    ConfigurationError,
    OperationInProgressError,
    InputValidationError,
    EmailValidationError,
    UsernameValidationError,
    EmptyInputError,
    DatabaseAuthenticatableError,
    NonValidInputError,
    NoDatabaseConnectionError,
    CouldNotLoginError,
    CouldNotCreateUserError,
    MultifactorRequiredError,
    CredentialAttribute,
    DatabaseUser,
    UpdateResult,
    Credentials,
    DatabaseUserInfo,
    InputValidator,
    EmailValidator,
    UsernameValidator,
    NonEmptyValidator,
    Connections,
    DatabaseConnection,
    DatabaseInteractor
)
from .core.api import (
    APIConfig,
    ProxyConfig,
    SSLConfig,
    TimeoutConfig,
    TelemetryConfig,
    AsyncAuthenticationClient,
    AuthenticationRequest,
    AuthenticationError,
    AuthErrorCodes
)

__version__ = '1.0.0'


def setup_logging(level=logging.INFO):
    """
    Configure logging for authlock modules.
    
    Args:
        level: Logging level (default: logging.INFO)
    """
    loggers = [
        'authlock',
        'authlock.api',
        'authlock.interactor',
    ]
    
    for logger_name in loggers:
        logger = logging.getLogger(logger_name)
        logger.setLevel(level)
        logger.propagate = True


__all__ = [
    # Interaction
    'DatabaseInteractor',
    'CredentialAttribute',
    'DatabaseUser',
    'UpdateResult',
    'Credentials',
    'DatabaseUserInfo',
    'Connections',
    'DatabaseConnection',
    
    # Validation
    'InputValidator',
    'EmailValidator',
    'UsernameValidator',
    'NonEmptyValidator',
    
    # Errors
    'AuthLockError',
    'ConfigurationError',
    'OperationInProgressError',
    'InputValidationError',
    'EmailValidationError',
    'UsernameValidationError',
    'EmptyInputError',
    'DatabaseAuthenticatableError',
    'NonValidInputError',
    'NoDatabaseConnectionError',
    'CouldNotLoginError',
    'CouldNotCreateUserError',
    'MultifactorRequiredError',
    
    # API
    'APIConfig',
    'ProxyConfig',
    'SSLConfig',
    'TimeoutConfig',
    'TelemetryConfig',
    'AsyncAuthenticationClient',
    'AuthenticationRequest',
    'AuthenticationError',
    'AuthErrorCodes',
    'setup_logging',
]
