"""
Async authentication API client.

Database login and sign up against the authentication API.
"""
import json
import asyncio
import logging
from typing import Dict, Optional, Any
import aiohttp

from .config import APIConfig
from .errors import AuthenticationError
from .request import AuthenticationRequest
from ..models import Credentials, DatabaseUserInfo
from ..logging import get_logger

LOGIN_PATH = 'oauth/ro'
SIGNUP_PATH = 'dbconnections/signup'

_REDACTED_KEYS = ('password', 'access_token', 'id_token', 'refresh_token')


def _redact(payload: Dict[str, Any]) -> Dict[str, Any]:
    return {key: ('***' if key in _REDACTED_KEYS else value) for key, value in payload.items()}


class AsyncAuthenticationClient:
    """
    Asynchronous authentication API client.
    
    Builds prepared requests for login and user creation. Nothing is sent
    until the request is started, which lets a caller prepare several calls
    up front and dispatch them in order.
    
    Example:
        >>> config = APIConfig(domain='samples.auth0.com', client_id='CLIENT_ID')
        >>> async with AsyncAuthenticationClient(config) as auth:
        ...     credentials = await auth.login('a@b.com', 'secret', 'db').start()
    """
    
    def __init__(
        self,
        config: Optional[APIConfig] = None,
        session: Optional[aiohttp.ClientSession] = None
    ):
        """
        Initialize async authentication client.
        
        Args:
            config: API configuration (read from the environment if not provided)
            session: Externally owned aiohttp session (not closed by this client)
        """
        self._config = config or APIConfig.from_env()
        self._session = session
        self._owns_session = session is None
        self._connector: Optional[aiohttp.TCPConnector] = None
        self._closed = False
        
        self._logger = get_logger('authlock.api')
        root_logger = logging.getLogger()
        if not root_logger.handlers:
            self._logger.setLevel(self._config.log_level)
    
    @property
    def config(self) -> APIConfig:
        """Get current configuration."""
        return self._config
    
    def logging(self, enabled: bool) -> 'AsyncAuthenticationClient':
        """Enable or disable HTTP request/response tracing."""
        self._config.log_http_requests = enabled
        return self
    
    async def __aenter__(self) -> 'AsyncAuthenticationClient':
        """Async context manager entry."""
        await self._ensure_session()
        return self
    
    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()
    
    async def _ensure_session(self) -> aiohttp.ClientSession:
        """Ensure session is created and open."""
        if self._session is None or self._session.closed:
            self._connector = aiohttp.TCPConnector(
                **self._config.get_connector_kwargs()
            )
            self._session = aiohttp.ClientSession(
                connector=self._connector,
                **self._config.get_session_kwargs()
            )
            self._owns_session = True
        return self._session
    
    async def close(self):
        """Close client and release resources."""
        self._closed = True
        
        if self._owns_session and self._session and not self._session.closed:
            await self._session.close()
        self._session = None
        
        if self._connector and not self._connector.closed:
            await self._connector.close()
        self._connector = None
    
    def login(
        self,
        username_or_email: str,
        password: str,
        connection: str,
        scope: Optional[str] = None,
        parameters: Optional[Dict[str, Any]] = None
    ) -> AuthenticationRequest[Credentials]:
        """
        Prepare a database login.
        
        Args:
            username_or_email: Email or username of the user
            password: User password
            connection: Database connection name
            scope: Requested scope (defaults to the configured one)
            parameters: Extra body parameters
            
        Returns:
            Prepared request yielding Credentials
        """
        payload: Dict[str, Any] = {
            'username': username_or_email,
            'password': password,
            'connection': connection,
            'grant_type': 'password',
            'scope': scope or self._config.scope,
            'client_id': self._config.client_id,
        }
        if parameters:
            payload.update(parameters)
        return AuthenticationRequest(self, LOGIN_PATH, payload, Credentials.from_dict)
    
    def create_user(
        self,
        email: str,
        password: str,
        connection: str,
        username: Optional[str] = None,
        user_metadata: Optional[Dict[str, Any]] = None
    ) -> AuthenticationRequest[DatabaseUserInfo]:
        """
        Prepare a database sign up.
        
        Args:
            email: User email
            password: User password
            connection: Database connection name
            username: Username, only for connections that require one
            user_metadata: Additional user metadata
            
        Returns:
            Prepared request yielding DatabaseUserInfo
        """
        payload: Dict[str, Any] = {
            'email': email,
            'password': password,
            'connection': connection,
            'client_id': self._config.client_id,
        }
        if username is not None:
            payload['username'] = username
        if user_metadata:
            payload['user_metadata'] = user_metadata
        return AuthenticationRequest(self, SIGNUP_PATH, payload, DatabaseUserInfo.from_dict)
    
    async def send(self, url: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        """
        POST a JSON body and return the decoded JSON object.
        
        Raises:
            AuthenticationError: On HTTP errors, unparsable bodies or network failures
        """
        if self._closed:
            raise AuthenticationError.network(RuntimeError("Client is closed"))
        
        session = await self._ensure_session()
        
        if self._config.log_http_requests:
            self._logger.debug(f"POST {url} {json.dumps(_redact(payload))}")
        
        try:
            async with session.post(
                url,
                json=payload,
                proxy=self._config.proxy.to_aiohttp_proxy() if self._config.proxy else None
            ) as response:
                body = await response.text()
                status = response.status
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            self._logger.error(f"Network error calling {url}: {e}")
            raise AuthenticationError.network(e) from e
        
        try:
            data = json.loads(body) if body else {}
        except ValueError:
            data = None
        
        if self._config.log_http_requests:
            self._log_response(status, data, body)
        
        if status >= 400 or not isinstance(data, dict):
            raise AuthenticationError.from_response(status, body)
        
        return data
    
    def _log_response(self, status: int, data: Any, body: str):
        """Trace a response with tokens and passwords masked."""
        if isinstance(data, dict):
            text = json.dumps(_redact(data))
        elif data is None:
            text = body[:1000] if len(body) > 1000 else body
        else:
            text = json.dumps(data)
        self._logger.debug(f"{status} {text}")
