"""
Unit tests for timestamp and password generation.
"""

import base64
from datetime import datetime

from daraja.utils.signing import generate_password, generate_timestamp, sign


def test_timestamp_format():
    assert generate_timestamp(datetime(2023, 9, 7, 19, 52, 44)) == '20230907195244'


def test_timestamp_pads_fields():
    assert generate_timestamp(datetime(2024, 1, 2, 3, 4, 5)) == '20240102030405'


def test_timestamp_defaults_to_now():
    value = generate_timestamp()
    assert len(value) == 14
    assert value.isdigit()


def test_password():
    password = generate_password(174379, 'testkey', '20230907195244')
    assert password == base64.b64encode(b'174379testkey20230907195244').decode('ascii')
    assert base64.b64decode(password) == b'174379testkey20230907195244'


def test_password_accepts_string_short_code():
    assert generate_password('174379', 'testkey', '20230907195244') == \
        generate_password(174379, 'testkey', '20230907195244')


def test_sign_pairs_timestamp_and_password():
    timestamp, password = sign(174379, 'testkey', datetime(2023, 9, 7, 19, 52, 44))

    assert timestamp == '20230907195244'
    assert base64.b64decode(password).decode('utf-8') == '174379testkey20230907195244'
