"""
Validation utilities for Daraja API operations.

Field predicates are pure and never raise. ``validate_request`` walks the
ordered rule table of a request type and returns the first violation as a
``ValidationError`` instance (it does not raise it), or None.
"""

from dataclasses import fields
from typing import Any, Callable, Dict, Iterable, Optional, Tuple, Type
from urllib.parse import urlparse

from ..constants import (
    CommandID, IdentifierType, QRTransactionCode, ResponseType, TransactionType,
    MAX_ACCOUNT_REFERENCE_LENGTH, MAX_TRANSACTION_DESC_LENGTH,
    MAX_REMARKS_LENGTH, MAX_OCCASION_LENGTH,
    MIN_PHONE_NUMBER, MAX_PHONE_NUMBER, MIN_SHORT_CODE, MAX_SHORT_CODE,
)
from ..exceptions import ValidationError, ValidationErrorKind as Kind
from ..types import (
    DarajaRequest,
    AccountBalanceRequest,
    B2CPaymentRequest,
    BusinessPayBillRequest,
    C2BRegisterURLRequest,
    C2BSimulateRequest,
    ExpressQueryRequest,
    ExpressSimulateRequest,
    GenerateQRRequest,
    RemitTaxRequest,
    ReverseRequest,
    TransactionStatusRequest,
)


def _as_number(value: Any) -> Optional[int]:
    """
    Return ``value`` as a non-negative int, accepting ints and ASCII digit strings.

    Strings with a leading zero are rejected so the digit count of the
    string sent on the wire matches the range check.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value >= 0 else None
    if isinstance(value, str) and value.isascii() and value.isdigit():
        if len(value) > 1 and value.startswith('0'):
            return None
        return int(value)
    return None


def is_phone_number(value: Any) -> bool:
    """
    Check that value is a 12 digit MSISDN, e.g. 254712345678.

    Args:
        value: int or digit string

    Returns:
        True if the number lies in the 12 digit range
    """
    number = _as_number(value)
    return number is not None and MIN_PHONE_NUMBER <= number <= MAX_PHONE_NUMBER


def is_short_code(value: Any) -> bool:
    """Check that value is a 5 to 7 digit short code, e.g. 174379."""
    number = _as_number(value)
    return number is not None and MIN_SHORT_CODE <= number <= MAX_SHORT_CODE


def is_valid_url(value: Any) -> bool:
    """Check that value is an absolute http(s) URL with a host."""
    if not isinstance(value, str) or not value:
        return False

    try:
        parsed = urlparse(value)
        host = parsed.hostname
    except ValueError:
        return False

    if parsed.scheme not in ('http', 'https'):
        return False

    return bool(host)


def is_identifier_type(value: Any) -> bool:
    """Check that value is one of the organization identifier types 1, 2 or 4."""
    number = _as_number(value)
    return number is not None and number in {t.value for t in IdentifierType}


def within_length(max_length: int) -> Callable[[Any], bool]:
    """Build a predicate accepting empty values and strings of at most max_length UTF-8 bytes."""
    def check(value):
        if value is None:
            return True
        return len(str(value).encode('utf-8')) <= max_length
    return check


def one_of(allowed: Iterable[str]) -> Callable[[Any], bool]:
    """Build a predicate accepting only the given values."""
    allowed = frozenset(getattr(a, 'value', a) for a in allowed)

    def check(value):
        return getattr(value, 'value', value) in allowed
    return check


# Ordered (predicate, attribute, kind) rules per request type.
Rule = Tuple[Callable[[Any], bool], str, Kind]

_URLS: Tuple[Rule, ...] = (
    (is_valid_url, 'queue_timeout_url', Kind.INVALID_URL),
    (is_valid_url, 'result_url', Kind.INVALID_URL),
)
_REMARKS: Rule = (within_length(MAX_REMARKS_LENGTH), 'remarks', Kind.INVALID_REMARKS)
_OCCASION: Rule = (within_length(MAX_OCCASION_LENGTH), 'occasion', Kind.INVALID_OCCASION)
_ACCOUNT_REFERENCE: Rule = (
    within_length(MAX_ACCOUNT_REFERENCE_LENGTH), 'account_reference', Kind.INVALID_ACCOUNT_REFERENCE
)

_PAYBILL_OR_BUYGOODS = (
    TransactionType.CUSTOMER_PAY_BILL_ONLINE.value,
    TransactionType.CUSTOMER_BUY_GOODS_ONLINE.value,
)

RULES: Dict[Type[DarajaRequest], Tuple[Rule, ...]] = {
    ExpressSimulateRequest: (
        (is_short_code, 'business_short_code', Kind.INVALID_SHORT_CODE),
        (one_of(_PAYBILL_OR_BUYGOODS), 'transaction_type', Kind.INVALID_TRANSACTION_TYPE),
        (is_phone_number, 'party_a', Kind.INVALID_PHONE_NUMBER),
        (is_phone_number, 'phone_number', Kind.INVALID_PHONE_NUMBER),
        (is_short_code, 'party_b', Kind.INVALID_SHORT_CODE),
        _ACCOUNT_REFERENCE,
        (within_length(MAX_TRANSACTION_DESC_LENGTH), 'transaction_desc', Kind.INVALID_TRANSACTION_DESC),
        (is_valid_url, 'callback_url', Kind.INVALID_URL),
    ),
    ExpressQueryRequest: (
        (is_short_code, 'business_short_code', Kind.INVALID_SHORT_CODE),
    ),
    B2CPaymentRequest: (
        (one_of((CommandID.BUSINESS_PAYMENT, CommandID.SALARY_PAYMENT, CommandID.PROMOTION_PAYMENT)),
         'command_id', Kind.INVALID_COMMAND_ID),
        (is_short_code, 'party_a', Kind.INVALID_SHORT_CODE),
        (is_phone_number, 'party_b', Kind.INVALID_PHONE_NUMBER),
        *_URLS,
        _REMARKS,
        _OCCASION,
    ),
    TransactionStatusRequest: (
        (one_of((CommandID.TRANSACTION_STATUS_QUERY,)), 'command_id', Kind.INVALID_COMMAND_ID),
        _REMARKS,
        _OCCASION,
        (is_identifier_type, 'identifier_type', Kind.INVALID_IDENTIFIER_TYPE),
        *_URLS,
    ),
    AccountBalanceRequest: (
        (one_of((CommandID.ACCOUNT_BALANCE,)), 'command_id', Kind.INVALID_COMMAND_ID),
        (is_identifier_type, 'identifier_type', Kind.INVALID_IDENTIFIER_TYPE),
        *_URLS,
        _REMARKS,
        (is_short_code, 'party_a', Kind.INVALID_SHORT_CODE),
    ),
    ReverseRequest: (
        (one_of((CommandID.TRANSACTION_REVERSAL,)), 'command_id', Kind.INVALID_COMMAND_ID),
        *_URLS,
        _REMARKS,
        _OCCASION,
    ),
    RemitTaxRequest: (
        (one_of((CommandID.PAY_TAX_TO_KRA,)), 'command_id', Kind.INVALID_COMMAND_ID),
        _REMARKS,
        *_URLS,
        (is_short_code, 'party_a', Kind.INVALID_SHORT_CODE),
        (is_short_code, 'party_b', Kind.INVALID_SHORT_CODE),
        _ACCOUNT_REFERENCE,
    ),
    BusinessPayBillRequest: (
        (one_of((CommandID.BUSINESS_PAY_BILL,)), 'command_id', Kind.INVALID_COMMAND_ID),
        (is_identifier_type, 'sender_identifier_type', Kind.INVALID_IDENTIFIER_TYPE),
        (is_identifier_type, 'receiver_identifier_type', Kind.INVALID_IDENTIFIER_TYPE),
        (is_short_code, 'party_a', Kind.INVALID_SHORT_CODE),
        (is_short_code, 'party_b', Kind.INVALID_SHORT_CODE),
        *_URLS,
        _REMARKS,
        _ACCOUNT_REFERENCE,
    ),
    GenerateQRRequest: (
        (one_of(c.value for c in QRTransactionCode), 'trx_code', Kind.INVALID_TRANSACTION_TYPE),
    ),
    C2BRegisterURLRequest: (
        (is_short_code, 'short_code', Kind.INVALID_SHORT_CODE),
        (one_of(r.value for r in ResponseType), 'response_type', Kind.INVALID_RESPONSE_TYPE),
        (is_valid_url, 'validation_url', Kind.INVALID_URL),
        (is_valid_url, 'confirmation_url', Kind.INVALID_URL),
    ),
    C2BSimulateRequest: (
        (one_of((CommandID.CUSTOMER_PAY_BILL_ONLINE, CommandID.CUSTOMER_BUY_GOODS_ONLINE)),
         'command_id', Kind.INVALID_COMMAND_ID),
        (is_short_code, 'short_code', Kind.INVALID_SHORT_CODE),
    ),
}


def _wire_name(request: DarajaRequest, attribute: str) -> str:
    for f in fields(request):
        if f.name == attribute:
            return f.metadata.get('wire') or attribute
    return attribute


def validate_request(request: DarajaRequest) -> Optional[ValidationError]:
    """
    Check a request against the rules of its operation.

    Rules are evaluated in a fixed order and the first violation wins.

    Args:
        request: Any operation request

    Returns:
        The ValidationError for the first violated rule, or None

    Raises:
        TypeError: If no rules are registered for the request type
    """
    try:
        rules = RULES[type(request)]
    except KeyError:
        raise TypeError(f"Unsupported request type: {type(request).__name__}") from None

    for check, attribute, kind in rules:
        if not check(getattr(request, attribute)):
            return ValidationError(kind, _wire_name(request, attribute))

    return None
