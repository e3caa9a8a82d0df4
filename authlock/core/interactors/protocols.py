"""
Collaborator protocols consumed by the interactors.

``AsyncAuthenticationClient`` satisfies ``Authentication``; tests and
embedding applications may plug any object with the same shape.
"""
from typing import Protocol, Optional, Any, Callable, TypeVar, runtime_checkable

from ..models import Credentials

T_co = TypeVar('T_co', covariant=True)


@runtime_checkable
class Request(Protocol[T_co]):
    """A prepared remote call."""
    
    async def start(self) -> T_co:
        """Send the call; raise on failure."""
        ...


@runtime_checkable
class Authentication(Protocol):
    """Remote authentication service."""
    
    def login(
        self,
        username_or_email: str,
        password: str,
        connection: str
    ) -> Request[Credentials]:
        """Prepare a login with a database connection."""
        ...
    
    def create_user(
        self,
        email: str,
        password: str,
        connection: str,
        username: Optional[str] = None
    ) -> Request[Any]:
        """Prepare a database sign up."""
        ...


AuthenticationCallback = Callable[[Credentials], None]
