"""
Timestamp and password generation for Lipa na M-Pesa Online requests.
"""

import base64
from datetime import datetime
from typing import Optional, Tuple, Union

from ..constants import TIMESTAMP_FORMAT


def generate_timestamp(now: Optional[datetime] = None) -> str:
    """
    Format a moment as the provider's YYYYMMDDHHMMSS timestamp.

    Args:
        now: Moment to format (default: current local time)

    Returns:
        Timestamp string, e.g. "20230907195244"
    """
    if now is None:
        now = datetime.now()
    return now.strftime(TIMESTAMP_FORMAT)


def generate_password(short_code: Union[int, str], pass_key: str, timestamp: str) -> str:
    """
    Build the request password.

    Password = Base64(BusinessShortCode + PassKey + Timestamp), with the
    short code written in decimal and no separators.
    """
    raw = f"{short_code}{pass_key}{timestamp}"
    return base64.b64encode(raw.encode('utf-8')).decode('ascii')


def sign(
    short_code: Union[int, str],
    pass_key: str,
    now: Optional[datetime] = None
) -> Tuple[str, str]:
    """
    Generate the timestamp and password pair for a request.

    Returns:
        (timestamp, password)
    """
    timestamp = generate_timestamp(now)
    return timestamp, generate_password(short_code, pass_key, timestamp)
