"""
Public client for the Daraja API.
"""

from typing import Optional

from .config import ClientConfig, Option
from .services.auth_service import AuthService
from .services.dispatcher import OperationDispatcher
from .types import (
    AccountBalanceRequest,
    AccountBalanceResponse,
    B2CPaymentRequest,
    B2CPaymentResponse,
    BusinessPayBillRequest,
    BusinessPayBillResponse,
    C2BRegisterURLRequest,
    C2BRegisterURLResponse,
    C2BSimulateRequest,
    C2BSimulateResponse,
    DarajaRequest,
    DarajaResponse,
    ExpressQueryRequest,
    ExpressQueryResponse,
    ExpressSimulateRequest,
    ExpressSimulateResponse,
    GenerateQRRequest,
    GenerateQRResponse,
    RemitTaxRequest,
    RemitTaxResponse,
    ReverseRequest,
    ReverseResponse,
    TokenResponse,
    TransactionStatusRequest,
    TransactionStatusResponse,
)
from .utils.credentials import SecurityCredentialEncoder
from .utils.http_client import HTTPClient


class DarajaClient:
    """
    Client for M-Pesa Daraja operations.

    Every call validates the request, signs it or encrypts its initiator
    password, fetches a fresh bearer token and sends it. Calls are
    synchronous and safe to make from several threads.

    Example:
        client = DarajaClient.from_settings()
        response = client.express_simulate(ExpressSimulateRequest(...))
    """

    def __init__(self, config: ClientConfig):
        self.config = config
        self.http_client = HTTPClient(
            config.base_url,
            timeout=config.timeout,
            max_idle_connections=config.max_idle_connections
        )
        self.auth_service = AuthService(config, self.http_client)
        self.credential_encoder = SecurityCredentialEncoder(
            self.http_client,
            config.certificate_url,
            fingerprint=config.certificate_fingerprint
        )
        self.dispatcher = OperationDispatcher(
            config,
            http_client=self.http_client,
            auth_service=self.auth_service,
            credential_encoder=self.credential_encoder
        )

    @classmethod
    def create(cls, *options: Option, **values) -> 'DarajaClient':
        """Build a client from keyword values and functional options."""
        return cls(ClientConfig.create(*options, **values))

    @classmethod
    def from_settings(cls, *options: Option) -> 'DarajaClient':
        """Build a client from the DARAJA_* Django settings."""
        return cls(ClientConfig.from_settings(*options))

    def token(self, timeout: Optional[float] = None) -> TokenResponse:
        """Fetch a bearer token."""
        return self.auth_service.generate_token(timeout=timeout)

    def dispatch(self, request: DarajaRequest, timeout: Optional[float] = None) -> DarajaResponse:
        """Send any registered request type."""
        return self.dispatcher.dispatch(request, timeout=timeout)

    def express_simulate(
        self,
        request: ExpressSimulateRequest,
        timeout: Optional[float] = None
    ) -> ExpressSimulateResponse:
        """
        Initiate an STK push payment prompt on the customer's phone.

        The timestamp and password are generated from the business short
        code and ``pass_key``.
        """
        return self.dispatch(request, timeout=timeout)

    def express_query(
        self,
        request: ExpressQueryRequest,
        timeout: Optional[float] = None
    ) -> ExpressQueryResponse:
        """Query the status of an STK push by its checkout request id."""
        return self.dispatch(request, timeout=timeout)

    def b2c_payment(
        self,
        request: B2CPaymentRequest,
        timeout: Optional[float] = None
    ) -> B2CPaymentResponse:
        """
        Pay out from a business short code to a customer.

        The result is delivered asynchronously to ``result_url``.
        """
        return self.dispatch(request, timeout=timeout)

    def account_balance(
        self,
        request: AccountBalanceRequest,
        timeout: Optional[float] = None
    ) -> AccountBalanceResponse:
        return self.dispatch(request, timeout=timeout)

    def c2b_register_url(
        self,
        request: C2BRegisterURLRequest,
        timeout: Optional[float] = None
    ) -> C2BRegisterURLResponse:
        """Register the validation and confirmation URLs of a short code."""
        return self.dispatch(request, timeout=timeout)

    def c2b_simulate(
        self,
        request: C2BSimulateRequest,
        timeout: Optional[float] = None
    ) -> C2BSimulateResponse:
        """Simulate a customer payment. Sandbox only."""
        return self.dispatch(request, timeout=timeout)

    def generate_qr(
        self,
        request: GenerateQRRequest,
        timeout: Optional[float] = None
    ) -> GenerateQRResponse:
        """Generate a dynamic QR code; ``qr_code`` holds the base64 image."""
        return self.dispatch(request, timeout=timeout)

    def reverse(
        self,
        request: ReverseRequest,
        timeout: Optional[float] = None
    ) -> ReverseResponse:
        return self.dispatch(request, timeout=timeout)

    def transaction_status(
        self,
        request: TransactionStatusRequest,
        timeout: Optional[float] = None
    ) -> TransactionStatusResponse:
        return self.dispatch(request, timeout=timeout)

    def remit_tax(
        self,
        request: RemitTaxRequest,
        timeout: Optional[float] = None
    ) -> RemitTaxResponse:
        """Remit tax to the Kenya Revenue Authority."""
        return self.dispatch(request, timeout=timeout)

    def business_paybill(
        self,
        request: BusinessPayBillRequest,
        timeout: Optional[float] = None
    ) -> BusinessPayBillResponse:
        """Pay from one business short code into another's pay bill."""
        return self.dispatch(request, timeout=timeout)

    def close(self):
        """Release pooled connections."""
        self.http_client.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()
