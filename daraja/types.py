"""
Typed requests and responses for Daraja API operations.

Attributes are snake_case; every field records the name the provider
expects on the wire. Caller-supplied secrets (pass keys and initiator
passwords) have no wire name and are never serialized.
"""

import uuid
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, ClassVar, Dict, Optional, Tuple, Union

from .constants import CommandID, TransactionType
from .exceptions import DecodeError

Number = Union[int, str]


def wire(name: str, default: Any = None, sensitive: bool = False):
    """Declare a request field serialized under ``name``."""
    return field(default=default, repr=not sensitive, metadata={'wire': name})


def secret(default: str = ''):
    """Declare a caller-supplied secret that stays on this side of the wire."""
    return field(default=default, repr=False, metadata={'wire': None})


def reply(*keys: str):
    """Declare a response field read from the first present key."""
    return field(default=None, metadata={'keys': keys})


@dataclass
class DarajaRequest:
    """Base class for operation requests."""

    def to_payload(self) -> Dict[str, Any]:
        """Serialize to the provider's JSON body, omitting empty fields."""
        payload = {}
        for f in fields(self):
            name = f.metadata.get('wire')
            if not name:
                continue
            value = getattr(self, f.name)
            if value is None or value == '':
                continue
            if isinstance(value, Enum):
                value = value.value
            payload[name] = value
        return payload


@dataclass
class ExpressSimulateRequest(DarajaRequest):
    """Lipa na M-Pesa Online (STK push) payment request."""
    pass_key: str = secret()
    business_short_code: Optional[Number] = wire('BusinessShortCode')
    transaction_type: str = wire('TransactionType', TransactionType.CUSTOMER_PAY_BILL_ONLINE.value)
    amount: Optional[int] = wire('Amount')
    party_a: Optional[Number] = wire('PartyA')
    party_b: Optional[Number] = wire('PartyB')
    phone_number: Optional[Number] = wire('PhoneNumber')
    callback_url: str = wire('CallBackURL', '')
    account_reference: str = wire('AccountReference', '')
    transaction_desc: str = wire('TransactionDesc', '')
    password: str = wire('Password', '', sensitive=True)
    timestamp: str = wire('Timestamp', '')


@dataclass
class ExpressQueryRequest(DarajaRequest):
    """Status query for an STK push."""
    pass_key: str = secret()
    business_short_code: Optional[Number] = wire('BusinessShortCode')
    checkout_request_id: str = wire('CheckoutRequestID', '')
    password: str = wire('Password', '', sensitive=True)
    timestamp: str = wire('Timestamp', '')


@dataclass
class B2CPaymentRequest(DarajaRequest):
    """Business to customer payout."""
    initiator_password: str = secret()
    originator_conversation_id: str = wire('OriginatorConversationID', '')
    initiator_name: str = wire('InitiatorName', '')
    command_id: str = wire('CommandID', CommandID.BUSINESS_PAYMENT.value)
    amount: Optional[int] = wire('Amount')
    party_a: Optional[Number] = wire('PartyA')
    party_b: Optional[Number] = wire('PartyB')
    remarks: str = wire('Remarks', '')
    queue_timeout_url: str = wire('QueueTimeOutURL', '')
    result_url: str = wire('ResultURL', '')
    occasion: str = wire('Occasion', '')
    security_credential: str = wire('SecurityCredential', '', sensitive=True)

    def __post_init__(self):
        if not self.originator_conversation_id:
            self.originator_conversation_id = uuid.uuid4().hex


@dataclass
class AccountBalanceRequest(DarajaRequest):
    """Balance enquiry for a short code."""
    initiator_password: str = secret()
    initiator_name: str = wire('Initiator', '')
    command_id: str = wire('CommandID', CommandID.ACCOUNT_BALANCE.value)
    identifier_type: Optional[int] = wire('IdentifierType')
    party_a: Optional[Number] = wire('PartyA')
    queue_timeout_url: str = wire('QueueTimeOutURL', '')
    result_url: str = wire('ResultURL', '')
    remarks: str = wire('Remarks', '')
    security_credential: str = wire('SecurityCredential', '', sensitive=True)


@dataclass
class ReverseRequest(DarajaRequest):
    """Reversal of a completed M-Pesa transaction."""
    initiator_password: str = secret()
    initiator_name: str = wire('Initiator', '')
    command_id: str = wire('CommandID', CommandID.TRANSACTION_REVERSAL.value)
    transaction_id: str = wire('TransactionID', '')
    amount: Optional[int] = wire('Amount')
    receiver_party: Optional[Number] = wire('ReceiverParty')
    # provider spelling
    receiver_identifier_type: Optional[int] = wire('RecieverIdentifierType')
    queue_timeout_url: str = wire('QueueTimeOutURL', '')
    result_url: str = wire('ResultURL', '')
    remarks: str = wire('Remarks', '')
    occasion: str = wire('Occasion', '')
    security_credential: str = wire('SecurityCredential', '', sensitive=True)


@dataclass
class TransactionStatusRequest(DarajaRequest):
    """Status query for any M-Pesa transaction."""
    initiator_password: str = secret()
    initiator_name: str = wire('Initiator', '')
    command_id: str = wire('CommandID', CommandID.TRANSACTION_STATUS_QUERY.value)
    transaction_id: str = wire('TransactionID', '')
    party_a: Optional[Number] = wire('PartyA')
    identifier_type: Optional[int] = wire('IdentifierType')
    queue_timeout_url: str = wire('QueueTimeOutURL', '')
    result_url: str = wire('ResultURL', '')
    remarks: str = wire('Remarks', '')
    occasion: str = wire('Occasion', '')
    security_credential: str = wire('SecurityCredential', '', sensitive=True)


@dataclass
class GenerateQRRequest(DarajaRequest):
    """Dynamic M-Pesa QR code."""
    merchant_name: str = wire('MerchantName', '')
    ref_no: str = wire('RefNo', '')
    amount: Optional[int] = wire('Amount')
    trx_code: str = wire('TrxCode', '')
    cpi: str = wire('CPI', '')
    size: str = wire('Size', '')


@dataclass
class C2BRegisterURLRequest(DarajaRequest):
    """Registration of C2B validation and confirmation URLs."""
    short_code: Optional[Number] = wire('ShortCode')
    response_type: str = wire('ResponseType', '')
    confirmation_url: str = wire('ConfirmationURL', '')
    validation_url: str = wire('ValidationURL', '')


@dataclass
class C2BSimulateRequest(DarajaRequest):
    """Simulated customer to business payment (sandbox)."""
    command_id: str = wire('CommandID', CommandID.CUSTOMER_PAY_BILL_ONLINE.value)
    amount: Optional[int] = wire('Amount')
    msisdn: Optional[Number] = wire('Msisdn')
    bill_ref_number: str = wire('BillRefNumber', '')
    short_code: Optional[Number] = wire('ShortCode')


@dataclass
class RemitTaxRequest(DarajaRequest):
    """Tax remittance to the Kenya Revenue Authority."""
    initiator_password: str = secret()
    initiator_name: str = wire('Initiator', '')
    command_id: str = wire('CommandID', CommandID.PAY_TAX_TO_KRA.value)
    sender_identifier_type: Optional[int] = wire('SenderIdentifierType')
    receiver_identifier_type: Optional[int] = wire('RecieverIdentifierType')
    amount: Optional[int] = wire('Amount')
    party_a: Optional[Number] = wire('PartyA')
    party_b: Optional[Number] = wire('PartyB')
    account_reference: str = wire('AccountReference', '')
    queue_timeout_url: str = wire('QueueTimeOutURL', '')
    result_url: str = wire('ResultURL', '')
    remarks: str = wire('Remarks', '')
    security_credential: str = wire('SecurityCredential', '', sensitive=True)


@dataclass
class BusinessPayBillRequest(DarajaRequest):
    """Business to business payment into a pay bill."""
    initiator_password: str = secret()
    initiator_name: str = wire('Initiator', '')
    command_id: str = wire('CommandID', CommandID.BUSINESS_PAY_BILL.value)
    sender_identifier_type: Optional[int] = wire('SenderIdentifierType')
    receiver_identifier_type: Optional[int] = wire('RecieverIdentifierType')
    amount: Optional[int] = wire('Amount')
    party_a: Optional[Number] = wire('PartyA')
    party_b: Optional[Number] = wire('PartyB')
    account_reference: str = wire('AccountReference', '')
    requester: Optional[Number] = wire('Requester')
    queue_timeout_url: str = wire('QueueTimeOutURL', '')
    result_url: str = wire('ResultURL', '')
    remarks: str = wire('Remarks', '')
    occasion: str = wire('Occasion', '')
    security_credential: str = wire('SecurityCredential', '', sensitive=True)


# Responses

@dataclass
class DarajaResponse:
    """Base class for decoded responses. ``raw`` keeps the full body."""
    raw: Dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    _required: ClassVar[Tuple[str, ...]] = ()

    @classmethod
    def from_payload(cls, payload: Any) -> 'DarajaResponse':
        """
        Decode a JSON body into this response type.

        Raises:
            DecodeError: If the body is not an object or lacks a required key
        """
        if not isinstance(payload, dict):
            raise DecodeError(
                f"Expected a JSON object for {cls.__name__}, got {type(payload).__name__}",
                response_data=payload
            )

        values = {'raw': payload}
        for f in fields(cls):
            keys = f.metadata.get('keys')
            if not keys:
                continue
            value = next((payload[k] for k in keys if payload.get(k) is not None), None)
            values[f.name] = str(value) if value is not None else None

        for name in cls._required:
            if not values.get(name):
                raise DecodeError(
                    f"Missing '{name}' in {cls.__name__} body",
                    response_data=payload
                )

        return cls(**values)


@dataclass
class TokenResponse(DarajaResponse):
    """Bearer token issued by the OAuth endpoint."""
    access_token: Optional[str] = reply('access_token')
    expires_in: Optional[str] = reply('expires_in')

    _required = ('access_token',)


@dataclass
class ValidResponse(DarajaResponse):
    """Acknowledgement envelope shared by the asynchronous operations."""
    # The provider has been seen to misspell the first key.
    originator_conversation_id: Optional[str] = reply(
        'OriginatorConversationID', 'OriginatorCoversationID'
    )
    conversation_id: Optional[str] = reply('ConversationID')
    response_description: Optional[str] = reply('ResponseDescription')
    response_code: Optional[str] = reply('ResponseCode')


@dataclass
class ExpressSimulateResponse(DarajaResponse):
    merchant_request_id: Optional[str] = reply('MerchantRequestID')
    checkout_request_id: Optional[str] = reply('CheckoutRequestID')
    response_description: Optional[str] = reply('ResponseDescription')
    response_code: Optional[str] = reply('ResponseCode')
    customer_message: Optional[str] = reply('CustomerMessage')


@dataclass
class ExpressQueryResponse(DarajaResponse):
    merchant_request_id: Optional[str] = reply('MerchantRequestID')
    checkout_request_id: Optional[str] = reply('CheckoutRequestID')
    response_description: Optional[str] = reply('ResponseDescription')
    response_code: Optional[str] = reply('ResponseCode')
    customer_message: Optional[str] = reply('CustomerMessage')
    result_code: Optional[str] = reply('ResultCode')
    result_desc: Optional[str] = reply('ResultDesc')


@dataclass
class GenerateQRResponse(DarajaResponse):
    response_description: Optional[str] = reply('ResponseDescription')
    response_code: Optional[str] = reply('ResponseCode')
    request_id: Optional[str] = reply('RequestID')
    qr_code: Optional[str] = reply('QRCode')


class B2CPaymentResponse(ValidResponse):
    pass


class AccountBalanceResponse(ValidResponse):
    pass


class ReverseResponse(ValidResponse):
    pass


class TransactionStatusResponse(ValidResponse):
    pass


class C2BRegisterURLResponse(ValidResponse):
    pass


class C2BSimulateResponse(ValidResponse):
    pass


class RemitTaxResponse(ValidResponse):
    pass


class BusinessPayBillResponse(ValidResponse):
    pass
