"""
API configuration module.

Provides the configuration for the authentication API client.
"""
import os
import ssl
import json
import base64
from dataclasses import dataclass, field
from typing import Optional, Dict, Any, Union

from ..exceptions import ConfigurationError

CLIENT_ID_ENV = 'AUTH0_CLIENT_ID'
DOMAIN_ENV = 'AUTH0_DOMAIN'


@dataclass
class ProxyConfig:
    """
    Proxy configuration.
    
    Supports HTTP and HTTPS proxies.
    """
    url: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None
    
    def to_aiohttp_proxy(self) -> Optional[str]:
        """Convert to aiohttp proxy format."""
        if not self.url:
            return None
        
        if self.username and self.password and '://' in self.url:
            protocol, rest = self.url.split('://', 1)
            return f"{protocol}://{self.username}:{self.password}@{rest}"
        
        return self.url


@dataclass
class SSLConfig:
    """SSL/TLS configuration."""
    verify: bool = True
    cert_file: Optional[str] = None
    key_file: Optional[str] = None
    ca_file: Optional[str] = None
    check_hostname: bool = True
    
    def create_ssl_context(self) -> Union[ssl.SSLContext, bool]:
        """Create SSL context from configuration (False disables verification)."""
        if not self.verify:
            return False
        
        context = ssl.create_default_context()
        
        if self.ca_file:
            context.load_verify_locations(self.ca_file)
        
        if self.cert_file:
            context.load_cert_chain(
                self.cert_file,
                keyfile=self.key_file
            )
        
        context.check_hostname = self.check_hostname
        
        return context


@dataclass
class TimeoutConfig:
    """Timeout configuration in seconds."""
    total: float = 30.0
    connect: float = 10.0
    sock_read: float = 20.0
    sock_connect: float = 10.0
    
    def to_aiohttp_timeout(self):
        """Convert to aiohttp ClientTimeout."""
        import aiohttp
        return aiohttp.ClientTimeout(
            total=self.total,
            connect=self.connect,
            sock_read=self.sock_read,
            sock_connect=self.sock_connect
        )


@dataclass
class TelemetryConfig:
    """Library information sent in the ``Auth0-Client`` header."""
    name: str = 'authlock'
    version: str = '1.0.0'
    enabled: bool = True
    
    def header_value(self) -> Optional[str]:
        """URL-safe base64 of the compact JSON library info."""
        if not self.enabled:
            return None
        payload = json.dumps({'name': self.name, 'version': self.version}, separators=(',', ':'))
        return base64.urlsafe_b64encode(payload.encode('utf-8')).decode('ascii').rstrip('=')


@dataclass
class APIConfig:
    """
    Complete API configuration.
    
    Centralizes all configuration options for the authentication client.
    """
    domain: str = ''
    client_id: str = ''
    
    user_agent: str = 'authlock/1.0.0'
    scope: str = 'openid'
    
    # Sub-configurations
    proxy: Optional[ProxyConfig] = None
    ssl: SSLConfig = field(default_factory=SSLConfig)
    timeout: TimeoutConfig = field(default_factory=TimeoutConfig)
    telemetry: TelemetryConfig = field(default_factory=TelemetryConfig)
    
    extra_headers: Dict[str, str] = field(default_factory=dict)
    
    # Logging
    log_level: int = 30  # logging.WARNING
    log_http_requests: bool = False
    
    # Connection pool settings
    limit_per_host: int = 10
    limit: int = 100
    
    @property
    def base_url(self) -> str:
        """Account URL, always ending with a slash."""
        domain = self.domain.strip()
        if '://' not in domain:
            domain = f"https://{domain}"
        return domain.rstrip('/') + '/'
    
    @classmethod
    def from_env(cls, **kwargs) -> 'APIConfig':
        """
        Create configuration from ``AUTH0_CLIENT_ID`` and ``AUTH0_DOMAIN``.
        
        Raises:
            ConfigurationError: If either variable is missing
        """
        client_id = os.environ.get(CLIENT_ID_ENV, '').strip()
        domain = os.environ.get(DOMAIN_ENV, '').strip()
        if not client_id or not domain:
            raise ConfigurationError(
                f"Both {CLIENT_ID_ENV} and {DOMAIN_ENV} must be set"
            )
        return cls(domain=domain, client_id=client_id, **kwargs)
    
    @classmethod
    def with_proxy(cls, proxy_url: str, **kwargs) -> 'APIConfig':
        """Create configuration with proxy."""
        return cls(
            proxy=ProxyConfig(url=proxy_url),
            **kwargs
        )
    
    @classmethod
    def insecure(cls, **kwargs) -> 'APIConfig':
        """Create configuration with SSL verification disabled."""
        return cls(
            ssl=SSLConfig(verify=False, check_hostname=False),
            **kwargs
        )
    
    def get_connector_kwargs(self) -> Dict[str, Any]:
        """Get kwargs for aiohttp TCPConnector."""
        return {
            'limit': self.limit,
            'limit_per_host': self.limit_per_host,
            'ssl': self.ssl.create_ssl_context(),
        }
    
    def get_session_kwargs(self) -> Dict[str, Any]:
        """Get kwargs for aiohttp ClientSession."""
        headers = {
            'User-Agent': self.user_agent,
            'Accept': 'application/json',
            **self.extra_headers
        }
        telemetry = self.telemetry.header_value()
        if telemetry:
            headers['Auth0-Client'] = telemetry
        
        return {
            'headers': headers,
            'timeout': self.timeout.to_aiohttp_timeout(),
        }
