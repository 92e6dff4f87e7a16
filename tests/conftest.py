"""
Pytest Configuration and Fixtures
"""
import datetime
import json
from unittest.mock import Mock

import django
import pytest
from cryptography import x509
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import ec, rsa
from cryptography.x509.oid import NameOID
from django.conf import settings

from daraja.config import ClientConfig


def pytest_configure():
    """Configure a minimal Django project with the daraja app installed"""
    settings.configure(
        INSTALLED_APPS=['daraja'],
        DARAJA_APP_KEY='test_app_key',
        DARAJA_APP_SECRET='test_app_secret',
    )
    django.setup()


def _self_signed(private_key) -> bytes:
    name = x509.Name([x509.NameAttribute(NameOID.COMMON_NAME, 'sandbox.test')])
    now = datetime.datetime.now(datetime.timezone.utc)
    certificate = (
        x509.CertificateBuilder()
        .subject_name(name)
        .issuer_name(name)
        .public_key(private_key.public_key())
        .serial_number(x509.random_serial_number())
        .not_valid_before(now - datetime.timedelta(days=1))
        .not_valid_after(now + datetime.timedelta(days=30))
        .sign(private_key, hashes.SHA256())
    )
    return certificate.public_bytes(serialization.Encoding.PEM)


@pytest.fixture(scope='session')
def rsa_key():
    """Throwaway RSA key pair"""
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope='session')
def certificate_pem(rsa_key):
    """PEM self-signed certificate for rsa_key"""
    return _self_signed(rsa_key)


@pytest.fixture(scope='session')
def ec_certificate_pem():
    """PEM certificate carrying a non-RSA key"""
    return _self_signed(ec.generate_private_key(ec.SECP256R1()))


@pytest.fixture(scope='session')
def certificate_fingerprint(certificate_pem):
    certificate = x509.load_pem_x509_certificate(certificate_pem)
    return certificate.fingerprint(hashes.SHA256()).hex()


@pytest.fixture
def config():
    return ClientConfig(app_key='test_app_key', app_secret='test_app_secret')


@pytest.fixture
def make_response():
    """Factory for mock requests.Response objects"""
    def _make(json_data=None, status_code=200, content=None):
        resp = Mock()
        resp.status_code = status_code
        if content is not None:
            resp.content = content
            resp.text = content.decode('utf-8', 'replace')
            resp.json.side_effect = ValueError('Expecting value: line 1 column 1 (char 0)')
        else:
            resp.json.return_value = json_data
            resp.text = json.dumps(json_data)
            resp.content = resp.text.encode('utf-8')
        return resp
    return _make


@pytest.fixture
def token_response(make_response):
    """Valid Daraja OAuth token response"""
    return make_response({'access_token': 'daraja_tok_abc', 'expires_in': '3599'})
