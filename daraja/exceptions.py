"""
Custom exceptions for Daraja (M-Pesa) API operations.
"""

from enum import Enum


class DarajaException(Exception):
    """Base exception for all Daraja-related errors."""

    def __init__(self, message, error_code=None, response_data=None):
        self.message = message
        self.error_code = error_code
        self.response_data = response_data
        super().__init__(self.message)


class ConfigurationError(DarajaException):
    """Raised when the client configuration is invalid."""
    pass


class ValidationErrorKind(str, Enum):
    """Closed set of request validation failures."""
    INVALID_COMMAND_ID = "invalid command id"
    INVALID_TRANSACTION_TYPE = "invalid transaction type"
    INVALID_PHONE_NUMBER = "invalid phone number"
    INVALID_SHORT_CODE = "invalid short code"
    INVALID_ACCOUNT_REFERENCE = "invalid account reference"
    INVALID_TRANSACTION_DESC = "invalid transaction description"
    INVALID_REMARKS = "invalid remarks"
    INVALID_OCCASION = "invalid occasion"
    INVALID_RESPONSE_TYPE = "invalid response type"
    INVALID_IDENTIFIER_TYPE = "invalid identifier type"
    INVALID_URL = "invalid url"


class ValidationError(DarajaException):
    """
    Raised when a request breaks one of the provider's field rules.

    Attributes:
        kind: The ValidationErrorKind that was violated
        field: Wire name of the offending field
    """

    def __init__(self, kind: ValidationErrorKind, field: str):
        self.kind = kind
        self.field = field
        super().__init__(f"{kind.value}: {field}", error_code=kind.name)


class CredentialError(DarajaException):
    """Raised when the security credential cannot be generated."""
    pass


class CertificateFetchError(CredentialError):
    """Raised when the public certificate cannot be downloaded."""
    pass


class CertificateDecodeError(CredentialError):
    """Raised when the certificate is not a usable PEM block."""
    pass


class CertificateParseError(CredentialError):
    """Raised when the PEM block is not a valid X.509 certificate."""
    pass


class CertificateVerificationError(CredentialError):
    """Raised when the certificate does not match the pinned fingerprint."""
    pass


class KeyTypeError(CredentialError):
    """Raised when the certificate does not carry an RSA public key."""
    pass


class EncryptionError(CredentialError):
    """Raised when the initiator password cannot be encrypted."""
    pass


class TransportError(DarajaException):
    """Raised on connection, TLS, timeout or body-read failures."""
    pass


class AuthenticationError(DarajaException):
    """Raised when the token endpoint refuses the app credentials."""
    pass


class ProviderError(DarajaException):
    """
    Raised when the Daraja API answers with a non-200 status.

    Carries the provider's requestId, errorCode and errorMessage as-is.
    """

    def __init__(self, request_id, code, message, status_code=None, response_data=None):
        self.request_id = request_id
        self.code = code
        self.status_code = status_code
        super().__init__(message, error_code=code, response_data=response_data)

    def __str__(self):
        return f"{self.code}: {self.message}"


class DecodeError(DarajaException):
    """Raised when a response body does not match the expected JSON shape."""
    pass
