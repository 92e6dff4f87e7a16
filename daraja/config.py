"""
Configuration management for the Daraja client.
"""

from typing import Any, Callable, Dict, Optional

from django.conf import settings

from .constants import (
    ALLOWED_BASE_URLS,
    CertificateURL,
    DEFAULT_BASE_URL,
    DEFAULT_MAX_IDLE_CONNECTIONS,
    DEFAULT_TIMEOUT,
)
from .exceptions import ConfigurationError

Option = Callable[[Dict[str, Any]], None]


def with_base_url(base_url: str) -> Option:
    """Override the environment base URL."""
    def option(values):
        values['base_url'] = base_url
    return option


def with_app_key(app_key: str) -> Option:
    """Override the consumer key."""
    def option(values):
        values['app_key'] = app_key
    return option


def with_app_secret(app_secret: str) -> Option:
    """Override the consumer secret."""
    def option(values):
        values['app_secret'] = app_secret
    return option


def with_max_idle_connections(connections: int) -> Option:
    """Override the size of the HTTP connection pool."""
    def option(values):
        values['max_idle_connections'] = connections
    return option


def with_timeout(timeout: float) -> Option:
    """Override the overall per-request timeout, in seconds."""
    def option(values):
        values['timeout'] = timeout
    return option


def with_certificate_fingerprint(fingerprint: str) -> Option:
    """Pin the SHA-256 fingerprint of the encryption certificate."""
    def option(values):
        values['certificate_fingerprint'] = fingerprint
    return option


class ClientConfig:
    """
    Immutable Daraja client settings.

    Values are validated once, at construction time, so a misconfigured
    client fails before any network call is attempted.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        app_key: str = '',
        app_secret: str = '',
        max_idle_connections: int = DEFAULT_MAX_IDLE_CONNECTIONS,
        timeout: float = DEFAULT_TIMEOUT,
        certificate_url: Optional[str] = None,
        certificate_fingerprint: Optional[str] = None,
    ):
        self._base_url = base_url
        self._app_key = app_key
        self._app_secret = app_secret
        self._max_idle_connections = max_idle_connections
        self._timeout = timeout
        self._certificate_url = certificate_url
        self._certificate_fingerprint = (
            certificate_fingerprint.replace(':', '').lower()
            if certificate_fingerprint else None
        )
        self._validate_settings()

    @classmethod
    def create(cls, *options: Option, **values) -> 'ClientConfig':
        """
        Build a config from keyword values, then apply functional options.

        Example:
            ClientConfig.create(
                with_app_key('key'),
                with_app_secret('secret'),
                with_base_url(Environment.PRODUCTION.value),
            )
        """
        for option in options:
            option(values)
        return cls(**values)

    @classmethod
    def from_settings(cls, *options: Option) -> 'ClientConfig':
        """Build a config from Django settings, then apply functional options."""
        values = {
            'base_url': getattr(settings, 'DARAJA_BASE_URL', DEFAULT_BASE_URL),
            'app_key': getattr(settings, 'DARAJA_APP_KEY', ''),
            'app_secret': getattr(settings, 'DARAJA_APP_SECRET', ''),
            'max_idle_connections': getattr(
                settings, 'DARAJA_MAX_IDLE_CONNECTIONS', DEFAULT_MAX_IDLE_CONNECTIONS
            ),
            'timeout': getattr(settings, 'DARAJA_TIMEOUT', DEFAULT_TIMEOUT),
            'certificate_url': getattr(settings, 'DARAJA_CERTIFICATE_URL', None),
            'certificate_fingerprint': getattr(
                settings, 'DARAJA_CERTIFICATE_FINGERPRINT', None
            ),
        }
        return cls.create(*options, **values)

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def app_key(self) -> str:
        return self._app_key

    @property
    def app_secret(self) -> str:
        return self._app_secret

    @property
    def max_idle_connections(self) -> int:
        return self._max_idle_connections

    @property
    def timeout(self) -> float:
        return self._timeout

    @property
    def is_sandbox(self) -> bool:
        return 'sandbox' in self._base_url

    @property
    def certificate_url(self) -> str:
        """Certificate location; the sandbox one when the base URL is a sandbox URL."""
        if self._certificate_url:
            return self._certificate_url
        if self.is_sandbox:
            return CertificateURL.SANDBOX.value
        return CertificateURL.PRODUCTION.value

    @property
    def certificate_fingerprint(self) -> Optional[str]:
        return self._certificate_fingerprint

    def _validate_settings(self):
        """
        Validate the settings.
        Raises ConfigurationError if validation fails.
        """
        if not self._base_url:
            raise ConfigurationError("missing base url")

        if self._base_url not in ALLOWED_BASE_URLS:
            raise ConfigurationError(
                "invalid base url, must be either "
                + " or ".join(sorted(ALLOWED_BASE_URLS))
            )

        if not self._app_key:
            raise ConfigurationError(
                "missing app key. Set DARAJA_APP_KEY in your Django settings "
                "or pass app_key explicitly."
            )

        if not self._app_secret:
            raise ConfigurationError(
                "missing app secret. Set DARAJA_APP_SECRET in your Django settings "
                "or pass app_secret explicitly."
            )

        if isinstance(self._max_idle_connections, bool) or not isinstance(self._max_idle_connections, int) \
                or self._max_idle_connections < 1:
            raise ConfigurationError("max idle connections must be a positive integer")

        if not self._timeout or self._timeout <= 0:
            raise ConfigurationError("timeout must be a positive number of seconds")

    def __repr__(self):
        return (
            f"ClientConfig(base_url={self._base_url!r}, app_key={self._app_key!r}, "
            f"app_secret='***', max_idle_connections={self._max_idle_connections})"
        )
