"""Connection descriptors and registry."""
from dataclasses import dataclass
from typing import Iterable, Optional


@dataclass(frozen=True)
class DatabaseConnection:
    """Username/password connection."""
    name: str
    requires_username: bool = False


class Connections:
    """
    Connections available to the widget.
    
    At most one database connection is active at a time. Not having one is
    a configuration problem reported by the interactor, not an input error.
    
    Example:
        >>> connections = Connections().add_database('Username-Password-Authentication')
        >>> connections.database.name
        'Username-Password-Authentication'
    """
    
    def __init__(self, database: Optional[DatabaseConnection] = None):
        self._database = database
    
    @property
    def database(self) -> Optional[DatabaseConnection]:
        """Currently selected database connection."""
        return self._database
    
    @property
    def is_empty(self) -> bool:
        return self._database is None
    
    def add_database(self, name: str, requires_username: bool = False) -> 'Connections':
        """Set the database connection, replacing any previous one."""
        if not name:
            raise ValueError("Connection name must not be empty")
        self._database = DatabaseConnection(name=name, requires_username=requires_username)
        return self
    
    def select(self, names: Iterable[str]) -> 'Connections':
        """
        Filter connections by name.
        
        Args:
            names: Allowed connection names; an empty list allows all
            
        Returns:
            New registry with the allowed connections only
        """
        allowed = set(names)
        if not allowed:
            return Connections(self._database)
        if self._database is not None and self._database.name in allowed:
            return Connections(self._database)
        return Connections()
    
    def __repr__(self) -> str:
        return f"Connections(database={self._database!r})"
