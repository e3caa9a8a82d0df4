"""
Error taxonomy for authlock.

Input validation errors are raised synchronously by
``DatabaseInteractor.update``. Submit errors (login / sign up) are never
raised: they are returned from ``login``/``create`` and handed to the
completion callback.
"""
from typing import Optional, Any


class AuthLockError(Exception):
    """Base exception for all authlock errors."""
    
    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        """
        Initialize the exception.
        
        Args:
            message: Error message
            cause: Underlying error (if any)
        """
        self.cause = cause
        super().__init__(message)


class ConfigurationError(AuthLockError):
    """Raised when client id or domain cannot be resolved."""
    pass


class OperationInProgressError(AuthLockError):
    """Raised when login/create is started while another one is in flight."""
    pass


# Input validation

class InputValidationError(AuthLockError):
    """A single field failed its local validation."""
    
    def __init__(self, message: str, attribute: Any = None) -> None:
        """
        Initialize the exception.
        
        Args:
            message: Error message
            attribute: CredentialAttribute that failed validation
        """
        self.attribute = attribute
        super().__init__(message)


class EmailValidationError(InputValidationError):
    """Value is empty or not an email address."""
    
    def __init__(self, message: str = "Invalid email address", attribute: Any = None) -> None:
        super().__init__(message, attribute)


class UsernameValidationError(InputValidationError):
    """Value is empty or outside the username policy."""
    
    def __init__(self, message: str = "Invalid username", attribute: Any = None) -> None:
        super().__init__(message, attribute)


class EmptyInputError(InputValidationError):
    """Value is missing or empty."""
    
    def __init__(self, message: str = "Value must not be empty", attribute: Any = None) -> None:
        super().__init__(message, attribute)


# Submit outcomes

class DatabaseAuthenticatableError(AuthLockError):
    """Terminal failure of a database login or sign up."""
    
    default_message = "Authentication failed"
    
    def __init__(self, message: Optional[str] = None, cause: Optional[BaseException] = None) -> None:
        super().__init__(message or self.default_message, cause)
    

class NonValidInputError(DatabaseAuthenticatableError):
    """A required field is missing or failed its last validation."""
    default_message = "Missing or invalid credentials"


class NoDatabaseConnectionError(DatabaseAuthenticatableError):
    """No database connection is configured."""
    default_message = "No database connection configured"


class CouldNotLoginError(DatabaseAuthenticatableError):
    """Remote login failed for a reason other than multifactor."""
    default_message = "Could not log in"


class CouldNotCreateUserError(DatabaseAuthenticatableError):
    """Remote account creation failed."""
    default_message = "Could not create user"


class MultifactorRequiredError(DatabaseAuthenticatableError):
    """Login needs a second factor or multifactor enrollment."""
    default_message = "Multifactor authentication required"
