"""
Database (username/password) interactor.

Holds the credentials being typed, validates them field by field and
drives login and sign up against the authentication service.
"""
from typing import Optional, Callable

from .protocols import Authentication, AuthenticationCallback, Request
from ..connections import Connections
from ..exceptions import (
    InputValidationError,
    DatabaseAuthenticatableError,
    NonValidInputError,
    NoDatabaseConnectionError,
    CouldNotLoginError,
    CouldNotCreateUserError,
    MultifactorRequiredError,
    OperationInProgressError
)
from ..api.errors import AuthenticationError
from ..logging import get_logger
from ..models import Credentials, CredentialAttribute, DatabaseUser, UpdateResult
from ..validators import (
    InputValidator,
    EmailValidator,
    UsernameValidator,
    NonEmptyValidator,
    trimmed
)

Completion = Callable[[Optional[DatabaseAuthenticatableError]], None]

logger = get_logger('authlock.interactor')


class DatabaseInteractor:
    """
    Credential interaction engine for database connections.
    
    ``update`` is the only way to change the credential record and always
    revalidates the value it stores. ``login`` and ``create`` check the
    record, call the authentication service and finish with a single
    outcome: None on success, otherwise a ``DatabaseAuthenticatableError``.
    The outcome is returned and, when given, passed to ``callback``. On
    success the credentials are handed to ``on_authentication`` after the
    callback has run.
    
    One interactor runs one submit at a time. Starting ``login`` or
    ``create`` while another is awaiting the service raises
    ``OperationInProgressError``.
    
    Example:
        >>> interactor = DatabaseInteractor(connections, auth, on_authentication=store)
        >>> interactor.update(CredentialAttribute.EMAIL, 'a@b.com')
        >>> interactor.update(CredentialAttribute.PASSWORD, 'secret')
        >>> error = await interactor.login()
    """
    
    def __init__(
        self,
        connections: Connections,
        authentication: Authentication,
        user: Optional[DatabaseUser] = None,
        on_authentication: Optional[AuthenticationCallback] = None,
        email_validator: Optional[InputValidator] = None,
        username_validator: Optional[InputValidator] = None,
        password_validator: Optional[InputValidator] = None
    ):
        """
        Initialize interactor.
        
        Args:
            connections: Configured connections
            authentication: Remote authentication service
            user: Initial credential record (a blank one if not provided); its
                values are revalidated
            on_authentication: Receives the credentials of a successful login
            email_validator: Validator for emails
            username_validator: Validator for usernames
            password_validator: Validator for passwords
        """
        self.connections = connections
        self.authentication = authentication
        self.on_authentication = on_authentication or (lambda credentials: None)
        self._user = user or DatabaseUser()
        self._email_validator = email_validator or EmailValidator()
        self._username_validator = username_validator or UsernameValidator()
        self._password_validator = password_validator or NonEmptyValidator()
        self._in_progress = False
        
        # Recompute the flags of an injected record
        for attribute in (CredentialAttribute.EMAIL, CredentialAttribute.USERNAME, CredentialAttribute.PASSWORD):
            self._update(attribute, getattr(self._user, attribute.value))
    
    # Read accessors
    
    @property
    def identifier(self) -> Optional[str]:
        """Email if valid, else username if valid, else None."""
        return self._user.identifier
    
    @property
    def email(self) -> Optional[str]:
        return self._user.email
    
    @property
    def username(self) -> Optional[str]:
        return self._user.username
    
    @property
    def password(self) -> Optional[str]:
        return self._user.password
    
    @property
    def valid_email(self) -> bool:
        return self._user.valid_email
    
    @property
    def valid_username(self) -> bool:
        return self._user.valid_username
    
    @property
    def valid_password(self) -> bool:
        return self._user.valid_password
    
    @property
    def in_progress(self) -> bool:
        """True while login/create is waiting on the service."""
        return self._in_progress
    
    # Input
    
    def update(self, attribute: CredentialAttribute, value: Optional[str]) -> UpdateResult:
        """
        Store and validate a field.
        
        EMAIL_OR_USERNAME updates both email and username, each with its own
        validator, and only fails when both fail. The email error wins in
        that case.
        
        Args:
            attribute: Field being edited
            value: New value (None clears it)
            
        Returns:
            UpdateResult with the error (or None) of every validated field
            
        Raises:
            InputValidationError: If the update failed
        """
        if attribute is CredentialAttribute.EMAIL_OR_USERNAME:
            errors = {
                CredentialAttribute.EMAIL: self._update(CredentialAttribute.EMAIL, value),
                CredentialAttribute.USERNAME: self._update(CredentialAttribute.USERNAME, value),
            }
        else:
            errors = {attribute: self._update(attribute, value)}
        
        result = UpdateResult(attribute=attribute, errors=errors)
        logger.debug(f"Updated {attribute.value}: failed={[a.value for a in result.failed]}")
        
        if errors and all(error is not None for error in errors.values()):
            raise next(iter(errors.values()))
        return result
    
    def _update(self, attribute: CredentialAttribute, value: Optional[str]) -> Optional[InputValidationError]:
        if attribute is CredentialAttribute.EMAIL:
            validator, stored = self._email_validator, trimmed(value)
        elif attribute is CredentialAttribute.USERNAME:
            validator, stored = self._username_validator, trimmed(value)
        elif attribute is CredentialAttribute.PASSWORD:
            validator, stored = self._password_validator, value
        else:
            raise ValueError(f"Unsupported attribute: {attribute}")
        
        return self._user.store(attribute, stored, validator)
    
    # Submit
    
    async def login(self, callback: Optional[Completion] = None) -> Optional[DatabaseAuthenticatableError]:
        """
        Log in with the identifier and password entered so far.
        
        Args:
            callback: Receives the outcome (None on success)
            
        Returns:
            None on success, otherwise the error also passed to ``callback``
            
        Raises:
            OperationInProgressError: If another login/create is running
        """
        self._begin()
        try:
            identifier = self.identifier
            if identifier is None:
                return self._finish(NonValidInputError(), callback)
            
            password = self._user.password
            if password is None or not self._user.valid_password:
                return self._finish(NonValidInputError(), callback)
            
            connection = self.connections.database
            if connection is None:
                return self._finish(NoDatabaseConnectionError(), callback)
            
            logger.info(f"Logging in with connection {connection.name}")
            try:
                request = self.authentication.login(identifier, password, connection.name)
            except Exception as e:
                logger.warning(f"Could not prepare login: {e}")
                return self._finish(CouldNotLoginError(cause=e), callback)
            return await self._login(request, callback)
        finally:
            self._in_progress = False
    
    async def create(self, callback: Optional[Completion] = None) -> Optional[DatabaseAuthenticatableError]:
        """
        Sign up the user, then log them in.
        
        The login request is prepared before anything is sent and is only
        sent once the user has been created. If creation fails, or either
        request cannot be prepared, no login is attempted.
        
        Args:
            callback: Receives the outcome (None on success)
            
        Returns:
            None on success, otherwise the error also passed to ``callback``
            
        Raises:
            OperationInProgressError: If another login/create is running
        """
        self._begin()
        try:
            connection = self.connections.database
            if connection is None:
                return self._finish(NoDatabaseConnectionError(), callback)
            
            email = self._user.email
            password = self._user.password
            if email is None or not self._user.valid_email:
                return self._finish(NonValidInputError(), callback)
            if password is None or not self._user.valid_password:
                return self._finish(NonValidInputError(), callback)
            
            if connection.requires_username and not self._user.valid_username:
                return self._finish(NonValidInputError(), callback)
            
            username = self._user.username if connection.requires_username else None
            
            logger.info(f"Creating user with connection {connection.name}")
            try:
                login = self.authentication.login(email, password, connection.name)
                create_user = self.authentication.create_user(
                    email,
                    password,
                    connection.name,
                    username=username
                )
                await create_user.start()
            except Exception as e:
                logger.warning(f"User creation failed: {e}")
                return self._finish(CouldNotCreateUserError(cause=e), callback)
            
            return await self._login(login, callback)
        finally:
            self._in_progress = False
    
    def _begin(self):
        if self._in_progress:
            raise OperationInProgressError("A login or sign up is already in progress")
        self._in_progress = True
    
    async def _login(self, request: Request[Credentials], callback: Optional[Completion]) -> Optional[DatabaseAuthenticatableError]:
        try:
            credentials = await request.start()
        except Exception as e:
            if isinstance(e, AuthenticationError) and (
                e.is_multifactor_required or e.is_multifactor_enroll_required
            ):
                logger.warning("Login requires multifactor authentication")
                return self._finish(MultifactorRequiredError(cause=e), callback)
            logger.warning(f"Login failed: {e}")
            return self._finish(CouldNotLoginError(cause=e), callback)
        
        self._finish(None, callback)
        self.on_authentication(credentials)
        return None
    
    def _finish(
        self,
        error: Optional[DatabaseAuthenticatableError],
        callback: Optional[Completion]
    ) -> Optional[DatabaseAuthenticatableError]:
        self._in_progress = False
        if error is not None:
            logger.debug(f"Finished with {type(error).__name__}")
        if callback is not None:
            callback(error)
        return error
