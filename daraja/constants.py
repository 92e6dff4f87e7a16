"""
Constants and enums for Daraja (M-Pesa) API operations.
"""

from enum import Enum


class Environment(str, Enum):
    """Daraja environments and their base URLs."""
    PRODUCTION = "https://api.safaricom.co.ke"
    SANDBOX = "https://sandbox.safaricom.co.ke"


ALLOWED_BASE_URLS = frozenset(env.value for env in Environment)


class CertificateURL(str, Enum):
    """Public certificates used to encrypt the initiator password."""
    PRODUCTION = (
        "https://developer.safaricom.co.ke/api/v1/"
        "GenerateSecurityCredential/ProductionCertificate.cer"
    )
    SANDBOX = (
        "https://developer.safaricom.co.ke/api/v1/"
        "GenerateSecurityCredential/SandboxCertificate.cer"
    )


class TransactionType(str, Enum):
    """Lipa na M-Pesa Online transaction types."""
    CUSTOMER_PAY_BILL_ONLINE = "CustomerPayBillOnline"
    CUSTOMER_BUY_GOODS_ONLINE = "CustomerBuyGoodsOnline"


class CommandID(str, Enum):
    """Command identifiers accepted by the Daraja API."""
    CUSTOMER_PAY_BILL_ONLINE = "CustomerPayBillOnline"
    CUSTOMER_BUY_GOODS_ONLINE = "CustomerBuyGoodsOnline"
    BUSINESS_PAYMENT = "BusinessPayment"
    SALARY_PAYMENT = "SalaryPayment"
    PROMOTION_PAYMENT = "PromotionPayment"
    TRANSACTION_REVERSAL = "TransactionReversal"
    ACCOUNT_BALANCE = "AccountBalance"
    TRANSACTION_STATUS_QUERY = "TransactionStatusQuery"
    PAY_TAX_TO_KRA = "PayTaxToKRA"
    BUSINESS_PAY_BILL = "BusinessPayBill"


class IdentifierType(int, Enum):
    """Type of organization identifier."""
    MSISDN = 1
    TILL_NUMBER = 2
    SHORT_CODE = 4


class ResponseType(str, Enum):
    """Default C2B action when the validation URL is unreachable."""
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"


class QRTransactionCode(str, Enum):
    """Dynamic QR transaction codes."""
    SEND_BUSINESS = "SB"
    SEND_MONEY = "SM"
    PAY_BILL = "PB"
    WITHDRAW_AGENT = "WA"
    BUY_GOODS = "BG"


# API Endpoints
class APIEndpoints:
    """Daraja API endpoints, relative to the base URL."""
    GENERATE_TOKEN = "oauth/v1/generate?grant_type=client_credentials"

    EXPRESS_SIMULATE = "mpesa/stkpush/v1/processrequest"
    EXPRESS_QUERY = "mpesa/stkpushquery/v1/query"

    B2C_PAYMENT = "mpesa/b2c/v1/paymentrequest"
    ACCOUNT_BALANCE = "mpesa/accountbalance/v1/query"
    REVERSAL = "mpesa/reversal/v1/request"
    TRANSACTION_STATUS = "mpesa/transactionstatus/v1/query"

    GENERATE_QR = "mpesa/qrcode/v1/generate"

    REMIT_TAX = "mpesa/b2b/v1/remittax"
    BUSINESS_PAY_BILL = "mpesa/b2b/v1/paymentrequest"

    C2B_REGISTER_URL = "mpesa/c2b/v1/registerurl"
    C2B_SIMULATE = "mpesa/c2b/v1/simulate"


# Provider wire limits
MAX_ACCOUNT_REFERENCE_LENGTH = 12
MAX_TRANSACTION_DESC_LENGTH = 13
MAX_REMARKS_LENGTH = 100
MAX_OCCASION_LENGTH = 100

# MSISDN (12 digits, e.g. 2547XXXXXXXX) and short code (5 to 7 digits) ranges
MIN_PHONE_NUMBER = 100000000000
MAX_PHONE_NUMBER = 999999999999
MIN_SHORT_CODE = 10000
MAX_SHORT_CODE = 9999999

KENYA_COUNTRY_CODE = "254"

TIMESTAMP_FORMAT = "%Y%m%d%H%M%S"

# Default settings
DEFAULT_BASE_URL = Environment.SANDBOX.value
DEFAULT_TIMEOUT = 60  # seconds, applied to the connect and to each socket read
DEFAULT_MAX_IDLE_CONNECTIONS = 10
