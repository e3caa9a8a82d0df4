"""Core building blocks: credential record, validators and interactors."""
from .exceptions import (
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
    MultifactorRequiredError
)
from .models import CredentialAttribute, DatabaseUser, UpdateResult, Credentials, DatabaseUserInfo
from .validators import InputValidator, EmailValidator, UsernameValidator, NonEmptyValidator
from .connections import Connections, DatabaseConnection
from .interactors import DatabaseInteractor

__all__ = [
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
    'CredentialAttribute',
    'DatabaseUser',
    'UpdateResult',
    'Credentials',
    'DatabaseUserInfo',
    'InputValidator',
    'EmailValidator',
    'UsernameValidator',
    'NonEmptyValidator',
    'Connections',
    'DatabaseConnection',
    'DatabaseInteractor',
]
