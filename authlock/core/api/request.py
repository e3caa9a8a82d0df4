"""Prepared authentication API requests."""
from typing import Dict, Any, Callable, Generic, TypeVar, TYPE_CHECKING

if TYPE_CHECKING:
    from .async_client import AsyncAuthenticationClient

T = TypeVar('T')


class AuthenticationRequest(Generic[T]):
    """
    A request that has been built but not sent.
    
    Creating it performs no I/O. Every ``await request.start()`` sends it
    and returns the parsed payload, or raises ``AuthenticationError``.
    """
    
    def __init__(
        self,
        client: 'AsyncAuthenticationClient',
        path: str,
        payload: Dict[str, Any],
        parse: Callable[[Dict[str, Any]], T]
    ):
        self._client = client
        self.path = path
        self._payload = payload
        self._parse = parse
    
    @property
    def url(self) -> str:
        return f"{self._client.config.base_url}{self.path}"
    
    @property
    def payload(self) -> Dict[str, Any]:
        """Copy of the JSON body."""
        return dict(self._payload)
    
    async def start(self) -> T:
        """
        Send the request.
        
        Returns:
            Parsed response
            
        Raises:
            AuthenticationError: If the API rejects the request or is unreachable
        """
        data = await self._client.send(self.url, self._payload)
        return self._parse(data)
    
    def __repr__(self) -> str:
        return f"AuthenticationRequest(POST {self.path})"
