"""
M-Pesa Daraja client for Django

A typed, validating client for Safaricom's Daraja API: STK push, B2C,
balance, reversal, transaction status, QR codes, tax remittance, B2B and C2B.
"""

__version__ = "0.1.0"

from .client import DarajaClient
from .config import (
    ClientConfig,
    with_app_key,
    with_app_secret,
    with_base_url,
    with_certificate_fingerprint,
    with_max_idle_connections,
    with_timeout,
)
from .constants import Environment
from .middleware import LoggingClient
from .operations import OperationKind

__all__ = [
    'DarajaClient',
    'LoggingClient',
    'ClientConfig',
    'Environment',
    'OperationKind',
    'with_app_key',
    'with_app_secret',
    'with_base_url',
    'with_certificate_fingerprint',
    'with_max_idle_connections',
    'with_timeout',
]
