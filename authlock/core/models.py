"""Credential record and authentication result models."""
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Any, Optional

from .exceptions import InputValidationError


class CredentialAttribute(Enum):
    """Field kinds accepted by ``DatabaseInteractor.update``."""
    EMAIL = 'email'
    USERNAME = 'username'
    PASSWORD = 'password'
    EMAIL_OR_USERNAME = 'email_or_username'


@dataclass
class DatabaseUser:
    """
    Credentials being typed by the user.
    
    Values are raw user input and may be invalid. Each ``valid_*`` flag is
    the result of the last validation of the matching value and is only
    written together with it by ``store``, which runs the validator.
    """
    email: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None
    valid_email: bool = False
    valid_username: bool = False
    valid_password: bool = False
    
    def store(self, attribute: CredentialAttribute, value: Optional[str], validator) -> Optional[InputValidationError]:
        """
        Validate a value and store it along with the outcome.
        
        Args:
            attribute: EMAIL, USERNAME or PASSWORD
            value: Value to keep
            validator: InputValidator deciding the validity flag
            
        Returns:
            The validation error, or None
        """
        if attribute is CredentialAttribute.EMAIL_OR_USERNAME:
            raise ValueError("EMAIL_OR_USERNAME must be stored as email and username")
        error = validator.validate(value)
        if error is not None:
            error.attribute = attribute
        setattr(self, attribute.value, value)
        setattr(self, f"valid_{attribute.value}", error is None)
        return error
    
    @property
    def identifier(self) -> Optional[str]:
        """Email if valid, else username if valid, else None."""
        if self.valid_email:
            return self.email
        if self.valid_username:
            return self.username
        return None


@dataclass
class UpdateResult:
    """
    Outcome of a successful ``update`` call.
    
    ``errors`` maps every field that was validated to its error, or None.
    For EMAIL_OR_USERNAME both fields are present, so a caller can tell a
    partial match (one of them failed) from a full one.
    """
    attribute: CredentialAttribute
    errors: Dict[CredentialAttribute, Optional[InputValidationError]] = field(default_factory=dict)
    
    @property
    def ok(self) -> bool:
        return all(error is None for error in self.errors.values())
    
    @property
    def partial(self) -> bool:
        return not self.ok and any(error is None for error in self.errors.values())
    
    @property
    def failed(self) -> list:
        return [attr for attr, error in self.errors.items() if error is not None]


@dataclass
class Credentials:
    """Tokens obtained from a successful login."""
    access_token: Optional[str] = None
    id_token: Optional[str] = None
    token_type: Optional[str] = None
    refresh_token: Optional[str] = None
    expires_in: Optional[int] = None
    scope: Optional[str] = None
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Credentials':
        """Create from a token endpoint JSON payload."""
        expires_in = data.get('expires_in')
        return cls(
            access_token=data.get('access_token'),
            id_token=data.get('id_token'),
            token_type=data.get('token_type'),
            refresh_token=data.get('refresh_token'),
            expires_in=int(expires_in) if expires_in is not None else None,
            scope=data.get('scope')
        )
    
    def __repr__(self) -> str:
        return f"Credentials(token_type={self.token_type!r}, expires_in={self.expires_in!r})"


@dataclass
class DatabaseUserInfo:
    """User created by a database sign up."""
    email: str
    username: Optional[str] = None
    verified: bool = False
    user_id: Optional[str] = None
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'DatabaseUserInfo':
        """Create from a sign up JSON payload."""
        return cls(
            email=data.get('email', ''),
            username=data.get('username'),
            verified=bool(data.get('email_verified', False)),
            user_id=data.get('_id') or data.get('user_id')
        )
