"""
Field validators.

Validators are stateless: they trim the value, check it and return an
``InputValidationError`` or None. Storing the outcome is up to the caller.
"""
import re
from typing import Protocol, Optional, Pattern, runtime_checkable

from .exceptions import (
    InputValidationError,
    EmailValidationError,
    UsernameValidationError,
    EmptyInputError
)

EMAIL_PATTERN = re.compile(r'^[A-Z0-9._%+-]+@[A-Z0-9.-]+\.[A-Z]{2,}$', re.IGNORECASE)
USERNAME_PATTERN = re.compile(r'^[A-Za-z0-9_]+$')


def trimmed(value: Optional[str]) -> Optional[str]:
    """Strip leading/trailing whitespace and line breaks, keeping None."""
    return value.strip() if value is not None else None


@runtime_checkable
class InputValidator(Protocol):
    """Protocol for field validators."""
    
    def validate(self, value: Optional[str]) -> Optional[InputValidationError]:
        """
        Validate a raw value.
        
        Args:
            value: Value as typed by the user
            
        Returns:
            The validation error, or None when the value is valid
        """
        ...


class EmailValidator:
    """Accepts ``local-part@domain.tld`` addresses."""
    
    def __init__(self, pattern: Pattern = EMAIL_PATTERN):
        self._pattern = pattern
    
    def validate(self, value: Optional[str]) -> Optional[InputValidationError]:
        email = trimmed(value)
        if not email or not self._pattern.match(email):
            return EmailValidationError()
        return None


class UsernameValidator:
    """
    Username policy.
    
    By default a username is 1 to 15 characters long and made of letters,
    digits and underscores. Both limits and the allowed characters can be
    replaced to match the policy of the database connection.
    """
    
    def __init__(
        self,
        min_length: int = 1,
        max_length: Optional[int] = 15,
        pattern: Optional[Pattern] = USERNAME_PATTERN
    ):
        """
        Initialize validator.
        
        Args:
            min_length: Minimum number of characters
            max_length: Maximum number of characters (None for no limit)
            pattern: Regex the whole username must match (None to allow anything)
        """
        if min_length < 1:
            raise ValueError("min_length must be at least 1")
        if max_length is not None and max_length < min_length:
            raise ValueError("max_length must not be lower than min_length")
        self.min_length = min_length
        self.max_length = max_length
        self._pattern = pattern
    
    @classmethod
    def permissive(cls) -> 'UsernameValidator':
        """Validator that only rejects empty usernames."""
        return cls(max_length=None, pattern=None)
    
    def validate(self, value: Optional[str]) -> Optional[InputValidationError]:
        username = trimmed(value)
        if not username:
            return UsernameValidationError("Username must not be empty")
        if len(username) < self.min_length:
            return UsernameValidationError()
        if self.max_length is not None and len(username) > self.max_length:
            return UsernameValidationError()
        if self._pattern is not None and not self._pattern.match(username):
            return UsernameValidationError()
        return None


class NonEmptyValidator:
    """Rejects None and empty strings; whitespace counts as content."""
    
    def validate(self, value: Optional[str]) -> Optional[InputValidationError]:
        if not value:
            return EmptyInputError()
        return None
