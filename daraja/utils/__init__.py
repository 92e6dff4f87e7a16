"""
Utility modules for Daraja operations.
"""

from .http_client import HTTPClient
from .validators import (
    is_phone_number,
    is_short_code,
    is_valid_url,
    is_identifier_type,
    within_length,
    validate_request
)
from .signing import generate_timestamp, generate_password, sign
from .credentials import encrypt_with_certificate, SecurityCredentialEncoder
from .formatters import format_phone_number, format_response

__all__ = [
    'HTTPClient',
    'is_phone_number',
    'is_short_code',
    'is_valid_url',
    'is_identifier_type',
    'within_length',
    'validate_request',
    'generate_timestamp',
    'generate_password',
    'sign',
    'encrypt_with_certificate',
    'SecurityCredentialEncoder',
    'format_phone_number',
    'format_response',
]
