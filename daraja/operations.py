"""
Registry of Daraja operations.

Each OperationKind maps to one Operation describing its endpoint, its
request and response types, and how the request is authorised. Adding an
operation means adding a request/response pair, its validation rules and
one entry here.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Type

from .constants import APIEndpoints
from . import types


class OperationKind(str, Enum):
    EXPRESS_SIMULATE = "express_simulate"
    EXPRESS_QUERY = "express_query"
    B2C_PAYMENT = "b2c_payment"
    ACCOUNT_BALANCE = "account_balance"
    REVERSAL = "reversal"
    TRANSACTION_STATUS = "transaction_status"
    GENERATE_QR = "generate_qr"
    C2B_REGISTER_URL = "c2b_register_url"
    C2B_SIMULATE = "c2b_simulate"
    REMIT_TAX = "remit_tax"
    BUSINESS_PAY_BILL = "business_pay_bill"


class OperationAuth(str, Enum):
    """Request-level authorisation applied before serialization."""
    NONE = "none"
    PASSWORD = "password"  # timestamp + base64(short code, pass key, timestamp)
    SECURITY_CREDENTIAL = "security_credential"  # RSA-encrypted initiator password


@dataclass(frozen=True)
class Operation:
    kind: OperationKind
    endpoint: str
    request_type: Type[types.DarajaRequest]
    response_type: Type[types.DarajaResponse]
    auth: OperationAuth = OperationAuth.NONE


OPERATIONS: Dict[OperationKind, Operation] = {
    op.kind: op for op in (
        Operation(
            OperationKind.EXPRESS_SIMULATE,
            APIEndpoints.EXPRESS_SIMULATE,
            types.ExpressSimulateRequest,
            types.ExpressSimulateResponse,
            OperationAuth.PASSWORD,
        ),
        Operation(
            OperationKind.EXPRESS_QUERY,
            APIEndpoints.EXPRESS_QUERY,
            types.ExpressQueryRequest,
            types.ExpressQueryResponse,
            OperationAuth.PASSWORD,
        ),
        Operation(
            OperationKind.B2C_PAYMENT,
            APIEndpoints.B2C_PAYMENT,
            types.B2CPaymentRequest,
            types.B2CPaymentResponse,
            OperationAuth.SECURITY_CREDENTIAL,
        ),
        Operation(
            OperationKind.ACCOUNT_BALANCE,
            APIEndpoints.ACCOUNT_BALANCE,
            types.AccountBalanceRequest,
            types.AccountBalanceResponse,
            OperationAuth.SECURITY_CREDENTIAL,
        ),
        Operation(
            OperationKind.REVERSAL,
            APIEndpoints.REVERSAL,
            types.ReverseRequest,
            types.ReverseResponse,
            OperationAuth.SECURITY_CREDENTIAL,
        ),
        Operation(
            OperationKind.TRANSACTION_STATUS,
            APIEndpoints.TRANSACTION_STATUS,
            types.TransactionStatusRequest,
            types.TransactionStatusResponse,
            OperationAuth.SECURITY_CREDENTIAL,
        ),
        Operation(
            OperationKind.GENERATE_QR,
            APIEndpoints.GENERATE_QR,
            types.GenerateQRRequest,
            types.GenerateQRResponse,
        ),
        Operation(
            OperationKind.C2B_REGISTER_URL,
            APIEndpoints.C2B_REGISTER_URL,
            types.C2BRegisterURLRequest,
            types.C2BRegisterURLResponse,
        ),
        Operation(
            OperationKind.C2B_SIMULATE,
            APIEndpoints.C2B_SIMULATE,
            types.C2BSimulateRequest,
            types.C2BSimulateResponse,
        ),
        Operation(
            OperationKind.REMIT_TAX,
            APIEndpoints.REMIT_TAX,
            types.RemitTaxRequest,
            types.RemitTaxResponse,
            OperationAuth.SECURITY_CREDENTIAL,
        ),
        Operation(
            OperationKind.BUSINESS_PAY_BILL,
            APIEndpoints.BUSINESS_PAY_BILL,
            types.BusinessPayBillRequest,
            types.BusinessPayBillResponse,
            OperationAuth.SECURITY_CREDENTIAL,
        ),
    )
}

_BY_REQUEST_TYPE: Dict[type, Operation] = {op.request_type: op for op in OPERATIONS.values()}


def operation_for(request: types.DarajaRequest) -> Operation:
    """
    Look up the operation a request belongs to.

    Raises:
        TypeError: If the request type is not registered
    """
    try:
        return _BY_REQUEST_TYPE[type(request)]
    except KeyError:
        raise TypeError(f"Unsupported request type: {type(request).__name__}") from None
