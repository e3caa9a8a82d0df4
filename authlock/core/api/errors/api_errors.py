"""Authentication API error codes and exceptions."""
import json
from typing import Dict, Any, Optional


class AuthErrorCodes:
    """Error codes returned by (or derived from) the authentication API."""
    
    INTERNAL_ERROR = 'a0.internal_error'
    NETWORK_ERROR = 'a0.network_error'
    
    MFA_REQUIRED = ('a0.mfa_required', 'mfa_required')
    MFA_ENROLL_REQUIRED = ('a0.mfa_registration_required', 'unsupported_challenge_type')
    MFA_INVALID_CODE = ('a0.mfa_invalid_code',)
    INVALID_CREDENTIALS = ('invalid_user_password',)
    PASSWORD_ALREADY_USED = ('invalid_password',)
    RULE_ERROR = ('unauthorized',)
    
    MESSAGES: Dict[str, str] = {
        'a0.internal_error': 'Failed to parse the authentication API response',
        'a0.network_error': 'Could not reach the authentication API',
        'a0.mfa_required': 'Multifactor authentication required',
        'mfa_required': 'Multifactor authentication required',
        'a0.mfa_registration_required': 'Multifactor enrollment required',
        'unsupported_challenge_type': 'Multifactor enrollment required',
        'a0.mfa_invalid_code': 'Invalid multifactor code',
        'invalid_user_password': 'Wrong email or password',
        'user_exists': 'The user already exists',
        'username_exists': 'The username already exists',
        'unauthorized': 'Authentication was rejected by a rule',
    }
    
    @classmethod
    def get_message(cls, code: str) -> str:
        """Gets the default message for an error code."""
        return cls.MESSAGES.get(code, f"Unknown error: {code}")


class AuthenticationError(Exception):
    """Exception raised for failed authentication API requests."""
    
    def __init__(
        self,
        code: str,
        description: Optional[str] = None,
        status_code: int = 0,
        info: Optional[Dict[str, Any]] = None
    ):
        self.code = code
        self.description = description or AuthErrorCodes.get_message(code)
        self.status_code = status_code
        self.info = info or {}
        super().__init__(f"{self.code}: {self.description}")
    
    @classmethod
    def from_response(cls, status_code: int, body: str) -> 'AuthenticationError':
        """
        Build an error from an HTTP error response.
        
        Accepts both ``{"error", "error_description"}`` and
        ``{"code", "description"}`` payloads. Anything else is reported as
        an internal error carrying the raw body.
        
        Args:
            status_code: HTTP status code
            body: Raw response body
            
        Returns:
            AuthenticationError
        """
        try:
            info = json.loads(body) if body else {}
        except ValueError:
            info = None
        
        if not isinstance(info, dict):
            return cls(
                AuthErrorCodes.INTERNAL_ERROR,
                body or None,
                status_code,
                {'description': body}
            )
        
        code = info.get('error') or info.get('code') or AuthErrorCodes.INTERNAL_ERROR
        description = info.get('error_description') or info.get('description')
        if isinstance(description, dict):
            description = description.get('message') or json.dumps(description)
        return cls(str(code), description, status_code, info)
    
    @classmethod
    def network(cls, cause: BaseException) -> 'AuthenticationError':
        """Build an error for a request that never got a response."""
        error = cls(AuthErrorCodes.NETWORK_ERROR, str(cause) or None)
        error.__cause__ = cause
        return error
    
    @property
    def is_multifactor_required(self) -> bool:
        return self.code in AuthErrorCodes.MFA_REQUIRED
    
    @property
    def is_multifactor_enroll_required(self) -> bool:
        return self.code in AuthErrorCodes.MFA_ENROLL_REQUIRED
    
    @property
    def is_multifactor_code_invalid(self) -> bool:
        return self.code in AuthErrorCodes.MFA_INVALID_CODE
    
    @property
    def is_invalid_credentials(self) -> bool:
        return self.code in AuthErrorCodes.INVALID_CREDENTIALS
    
    @property
    def is_password_not_strong_enough(self) -> bool:
        return (
            self.code in AuthErrorCodes.PASSWORD_ALREADY_USED
            and self.info.get('name') == 'PasswordStrengthError'
        )
    
    @property
    def is_password_already_used(self) -> bool:
        return (
            self.code in AuthErrorCodes.PASSWORD_ALREADY_USED
            and self.info.get('name') == 'PasswordHistoryError'
        )
    
    @property
    def is_rule_error(self) -> bool:
        return self.code in AuthErrorCodes.RULE_ERROR
    
    @property
    def is_network_error(self) -> bool:
        return self.code == AuthErrorCodes.NETWORK_ERROR
