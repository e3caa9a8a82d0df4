"""Tests for AsyncAuthenticationClient."""
import json
import pytest
import aiohttp
from unittest.mock import Mock, AsyncMock, MagicMock

from authlock.core.api import (
    APIConfig,
    AsyncAuthenticationClient,
    AuthenticationRequest,
    AuthenticationError
)
from authlock.core.models import Credentials, DatabaseUserInfo


def make_session(status=200, body='{}'):
    """Create an aiohttp session mock answering every POST the same way."""
    response = Mock()
    response.status = status
    response.text = AsyncMock(return_value=body)
    
    post = MagicMock()
    post.__aenter__ = AsyncMock(return_value=response)
    post.__aexit__ = AsyncMock(return_value=None)
    
    session = MagicMock()
    session.closed = False
    session.post = MagicMock(return_value=post)
    session.close = AsyncMock()
    return session


@pytest.fixture
def config():
    return APIConfig(domain='samples.auth0.com', client_id='CLIENT_ID')


class TestPreparedRequests:
    """Building requests performs no I/O."""
    
    def test_login_request(self, config):
        session = make_session()
        client = AsyncAuthenticationClient(config, session=session)
        
        request = client.login('a@b.com', 'secret', 'db')
        
        assert isinstance(request, AuthenticationRequest)
        assert request.url == 'https://samples.auth0.com/oauth/ro'
        assert request.payload == {
            'username': 'a@b.com',
            'password': 'secret',
            'connection': 'db',
            'grant_type': 'password',
            'scope': 'openid',
            'client_id': 'CLIENT_ID',
        }
        session.post.assert_not_called()
    
    def test_login_scope_and_parameters(self, config):
        client = AsyncAuthenticationClient(config, session=make_session())
        
        request = client.login('alice', 'secret', 'db', scope='openid offline_access', parameters={'device': 'phone'})
        
        assert request.payload['scope'] == 'openid offline_access'
        assert request.payload['device'] == 'phone'
    
    def test_create_user_request(self, config):
        client = AsyncAuthenticationClient(config, session=make_session())
        
        request = client.create_user('a@b.com', 'secret', 'db', username='alice', user_metadata={'plan': 'free'})
        
        assert request.url == 'https://samples.auth0.com/dbconnections/signup'
        assert request.payload == {
            'email': 'a@b.com',
            'password': 'secret',
            'connection': 'db',
            'client_id': 'CLIENT_ID',
            'username': 'alice',
            'user_metadata': {'plan': 'free'},
        }
    
    def test_create_user_without_username(self, config):
        client = AsyncAuthenticationClient(config, session=make_session())
        
        request = client.create_user('a@b.com', 'secret', 'db')
        
        assert 'username' not in request.payload


class TestSend:
    """Tests for dispatching requests."""
    
    @pytest.mark.asyncio
    async def test_login_success(self, config):
        body = json.dumps({'access_token': 'at', 'id_token': 'it', 'token_type': 'bearer'})
        session = make_session(200, body)
        client = AsyncAuthenticationClient(config, session=session)
        
        credentials = await client.login('a@b.com', 'secret', 'db').start()
        
        assert isinstance(credentials, Credentials)
        assert credentials.access_token == 'at'
        args, kwargs = session.post.call_args
        assert args[0] == 'https://samples.auth0.com/oauth/ro'
        assert kwargs['json']['username'] == 'a@b.com'
    
    @pytest.mark.asyncio
    async def test_create_user_success(self, config):
        session = make_session(200, json.dumps({'_id': 'u1', 'email': 'a@b.com', 'email_verified': False}))
        client = AsyncAuthenticationClient(config, session=session)
        
        info = await client.create_user('a@b.com', 'secret', 'db').start()
        
        assert isinstance(info, DatabaseUserInfo)
        assert info.user_id == 'u1'
    
    @pytest.mark.asyncio
    async def test_error_response(self, config):
        body = json.dumps({'error': 'a0.mfa_required', 'error_description': 'MFA required'})
        client = AsyncAuthenticationClient(config, session=make_session(401, body))
        
        with pytest.raises(AuthenticationError) as exc_info:
            await client.login('a@b.com', 'secret', 'db').start()
        
        assert exc_info.value.is_multifactor_required
        assert exc_info.value.status_code == 401
    
    @pytest.mark.asyncio
    async def test_invalid_json(self, config):
        client = AsyncAuthenticationClient(config, session=make_session(200, 'not json'))
        
        with pytest.raises(AuthenticationError) as exc_info:
            await client.login('a@b.com', 'secret', 'db').start()
        
        assert exc_info.value.code == 'a0.internal_error'
    
    @pytest.mark.asyncio
    async def test_network_error(self, config):
        session = make_session()
        session.post.side_effect = aiohttp.ClientConnectionError("refused")
        client = AsyncAuthenticationClient(config, session=session)
        
        with pytest.raises(AuthenticationError) as exc_info:
            await client.login('a@b.com', 'secret', 'db').start()
        
        assert exc_info.value.is_network_error
    
    @pytest.mark.asyncio
    async def test_each_start_sends_once(self, config):
        session = make_session(200, '{}')
        client = AsyncAuthenticationClient(config, session=session)
        request = client.create_user('a@b.com', 'secret', 'db')
        
        await request.start()
        await request.start()
        
        assert session.post.call_count == 2
    
    @pytest.mark.asyncio
    async def test_closed_client(self, config):
        session = make_session()
        client = AsyncAuthenticationClient(config, session=session)
        await client.close()
        
        with pytest.raises(AuthenticationError):
            await client.login('a@b.com', 'secret', 'db').start()
        
        session.post.assert_not_called()
    
    @pytest.mark.asyncio
    async def test_external_session_is_not_closed(self, config):
        session = make_session()
        
        async with AsyncAuthenticationClient(config, session=session):
            pass
        
        session.close.assert_not_awaited()
    
    @pytest.mark.asyncio
    async def test_http_logging_redacts_password(self, config, caplog):
        client = AsyncAuthenticationClient(config, session=make_session(200, '{}')).logging(True)
        
        with caplog.at_level('DEBUG', logger='authlock.api'):
            await client.login('a@b.com', 'hunter2', 'db').start()
        
        assert 'oauth/ro' in caplog.text
        assert 'hunter2' not in caplog.text
    
    @pytest.mark.asyncio
    async def test_http_logging_redacts_tokens(self, config, caplog):
        body = json.dumps({
            'access_token': 'at_secret',
            'id_token': 'it_secret',
            'refresh_token': 'rt_secret',
            'token_type': 'bearer',
        })
        client = AsyncAuthenticationClient(config, session=make_session(200, body)).logging(True)
        
        with caplog.at_level('DEBUG', logger='authlock.api'):
            credentials = await client.login('a@b.com', 'hunter2', 'db').start()
        
        assert credentials.access_token == 'at_secret'
        assert 'bearer' in caplog.text
        assert 'at_secret' not in caplog.text
        assert 'it_secret' not in caplog.text
        assert 'rt_secret' not in caplog.text
    
    @pytest.mark.asyncio
    async def test_http_logging_of_error_response(self, config, caplog):
        body = json.dumps({'error': 'invalid_user_password', 'error_description': 'Wrong email or password.'})
        client = AsyncAuthenticationClient(config, session=make_session(403, body)).logging(True)
        
        with caplog.at_level('DEBUG', logger='authlock.api'):
            with pytest.raises(AuthenticationError):
                await client.login('a@b.com', 'hunter2', 'db').start()
        
        assert 'invalid_user_password' in caplog.text
