"""
Security credential generation.

The security credential is the initiator password encrypted with the
public key of Safaricom's certificate (RSA, PKCS#1 v1.5 padding) and
base64 encoded. It is recomputed for every call and never stored.
"""

import base64
import binascii
import logging
import re
from typing import Optional

from cryptography import x509
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding, rsa

from ..exceptions import (
    CertificateDecodeError,
    CertificateFetchError,
    CertificateParseError,
    CertificateVerificationError,
    EncryptionError,
    KeyTypeError,
    TransportError,
)

logger = logging.getLogger(__name__)

_PEM_CERTIFICATE = re.compile(
    rb'-----BEGIN CERTIFICATE-----(?P<body>.*?)-----END CERTIFICATE-----',
    re.DOTALL
)


def decode_pem(data: bytes) -> bytes:
    """
    Extract the DER bytes of the first PEM certificate block.

    Raises:
        CertificateDecodeError: If there is no block, or it is empty or not base64
    """
    match = _PEM_CERTIFICATE.search(data or b'')
    if not match:
        raise CertificateDecodeError("No PEM certificate block found")

    body = b''.join(match.group('body').split())
    if not body:
        raise CertificateDecodeError("PEM certificate block is empty")

    try:
        return base64.b64decode(body, validate=True)
    except (binascii.Error, ValueError) as e:
        raise CertificateDecodeError(f"Malformed PEM certificate block: {str(e)}")


def load_certificate(data: bytes, fingerprint: Optional[str] = None) -> x509.Certificate:
    """
    Decode and parse a PEM certificate, optionally checking its SHA-256 fingerprint.

    Args:
        data: PEM-encoded certificate bytes
        fingerprint: Expected lowercase hex SHA-256 fingerprint

    Returns:
        The parsed certificate
    """
    der = decode_pem(data)

    try:
        certificate = x509.load_der_x509_certificate(der)
    except ValueError as e:
        raise CertificateParseError(f"Failed to parse certificate: {str(e)}")

    if fingerprint:
        actual = certificate.fingerprint(hashes.SHA256()).hex()
        if actual != fingerprint:
            raise CertificateVerificationError(
                f"Certificate fingerprint mismatch: expected {fingerprint}, got {actual}"
            )

    return certificate


def encrypt_with_certificate(
    plaintext: str,
    certificate_data: bytes,
    fingerprint: Optional[str] = None
) -> str:
    """
    Encrypt a secret with the RSA key of a PEM certificate.

    Output differs on every call because PKCS#1 v1.5 padding is randomized.

    Args:
        plaintext: Initiator password
        certificate_data: PEM-encoded X.509 certificate
        fingerprint: Optional pinned SHA-256 fingerprint (hex)

    Returns:
        Base64 (standard alphabet) ciphertext

    Raises:
        CertificateDecodeError, CertificateParseError,
        CertificateVerificationError, KeyTypeError, EncryptionError
    """
    certificate = load_certificate(certificate_data, fingerprint)

    public_key = certificate.public_key()
    if not isinstance(public_key, rsa.RSAPublicKey):
        raise KeyTypeError(
            f"Certificate key must be RSA, got {type(public_key).__name__}"
        )

    try:
        cipher = public_key.encrypt(plaintext.encode('utf-8'), padding.PKCS1v15())
    except (ValueError, TypeError) as e:
        raise EncryptionError(f"Failed to encrypt password: {str(e)}")

    return base64.b64encode(cipher).decode('ascii')


class SecurityCredentialEncoder:
    """
    Generates security credentials from a remotely served certificate.

    The certificate is downloaded on every call; nothing is cached.
    """

    def __init__(self, http_client, certificate_url: str, fingerprint: Optional[str] = None):
        """
        Args:
            http_client: HTTPClient used to download the certificate
            certificate_url: HTTPS location of the PEM certificate
            fingerprint: Optional pinned SHA-256 fingerprint (hex)
        """
        self.http_client = http_client
        self.certificate_url = certificate_url
        self.fingerprint = fingerprint

    def fetch_certificate(self, timeout=None) -> bytes:
        """
        Download the certificate bytes.

        Raises:
            CertificateFetchError: On network failure or a non-200 status
        """
        try:
            return self.http_client.fetch(self.certificate_url, timeout=timeout)
        except TransportError as e:
            raise CertificateFetchError(
                f"Failed to get certificate: {e.message}",
                error_code=e.error_code,
                response_data=e.response_data
            ) from e

    def encode(self, plaintext: str, timeout=None) -> str:
        """Fetch the certificate and encrypt ``plaintext`` with it."""
        data = self.fetch_certificate(timeout=timeout)
        logger.debug(f"Encrypting initiator password with certificate from {self.certificate_url}")
        return encrypt_with_certificate(plaintext, data, self.fingerprint)
