"""Pytest fixtures for authlock tests."""
import pytest
from unittest.mock import Mock, AsyncMock

from authlock import Connections, Credentials, DatabaseInteractor, AuthenticationError


@pytest.fixture
def credentials():
    """Credentials returned by a successful login."""
    return Credentials(
        access_token='access_token_123',
        id_token='id.token.jwt',
        token_type='bearer'
    )


@pytest.fixture
def connections():
    """Registry with a database connection that does not need a username."""
    return Connections().add_database('db')


@pytest.fixture
def username_connections():
    """Registry with a database connection that requires a username."""
    return Connections().add_database('db', requires_username=True)


@pytest.fixture
def mfa_error():
    """Login failure asking for a second factor."""
    return AuthenticationError('a0.mfa_required', 'Multifactor authentication required', 401)


@pytest.fixture
def authentication(credentials):
    """
    Authentication service mock.
    
    ``login`` and ``create_user`` return prepared requests whose ``start``
    is an AsyncMock; tests change ``side_effect`` to simulate failures.
    """
    auth = Mock()
    auth.login_request = Mock()
    auth.login_request.start = AsyncMock(return_value=credentials)
    auth.create_request = Mock()
    auth.create_request.start = AsyncMock(return_value=None)
    auth.login = Mock(return_value=auth.login_request)
    auth.create_user = Mock(return_value=auth.create_request)
    return auth


@pytest.fixture
def on_authentication():
    """Success handler spy."""
    return Mock()


@pytest.fixture
def interactor(connections, authentication, on_authentication):
    """Interactor wired to the mocked service."""
    return DatabaseInteractor(connections, authentication, on_authentication=on_authentication)
