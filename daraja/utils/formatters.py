"""
Data formatting utilities for Daraja operations.
"""

import json
import re
from dataclasses import fields
from typing import Any, Dict, Union

from ..constants import KENYA_COUNTRY_CODE


def format_phone_number(phone: Union[int, str]) -> str:
    """
    Format phone number to the 12 digit international form.

    Accepts: +254712345678, 0712345678, 254712345678, 712345678

    Args:
        phone: Phone number to format

    Returns:
        Formatted phone number (e.g., 254712345678), or "" for empty input
    """
    phone = re.sub(r'\D', '', str(phone or ''))
    if not phone:
        return ''

    if not phone.startswith(KENYA_COUNTRY_CODE):
        if phone.startswith('0'):
            phone = KENYA_COUNTRY_CODE + phone[1:]
        else:
            phone = KENYA_COUNTRY_CODE + phone

    return phone


def mask_value(value: str, visible: int = 4) -> str:
    """
    Mask all but the last characters of a value for display.

    Example: mask_value('254712345678') -> '********5678'
    """
    value = str(value)
    if len(value) <= visible:
        return '*' * len(value)
    return '*' * (len(value) - visible) + value[-visible:]


def response_to_dict(response) -> Dict[str, Any]:
    """Decoded fields of a response, without the raw body."""
    return {
        f.name: getattr(response, f.name)
        for f in fields(response)
        if f.name != 'raw'
    }


def format_response(response) -> str:
    """Render a response as indented JSON."""
    return json.dumps(response_to_dict(response), indent=2)
