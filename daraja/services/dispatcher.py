"""
Operation dispatcher for the Daraja API.

Every operation runs the same single pass:
validate -> sign or encode credential -> serialize -> fetch token -> send -> decode.
No step is retried; the first failure is raised to the caller.
"""

import logging
from dataclasses import replace
from datetime import datetime
from typing import Callable, Optional

from ..config import ClientConfig
from ..operations import Operation, OperationAuth, operation_for
from ..types import DarajaRequest, DarajaResponse
from ..utils.credentials import SecurityCredentialEncoder
from ..utils.http_client import HTTPClient
from ..utils.signing import sign
from ..utils.validators import validate_request
from .auth_service import AuthService

logger = logging.getLogger(__name__)


class OperationDispatcher:
    """
    Sends typed requests to their Daraja endpoints.
    """

    def __init__(
        self,
        config: ClientConfig,
        http_client: Optional[HTTPClient] = None,
        auth_service: Optional[AuthService] = None,
        credential_encoder: Optional[SecurityCredentialEncoder] = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.config = config
        self.http_client = http_client or HTTPClient(
            config.base_url,
            timeout=config.timeout,
            max_idle_connections=config.max_idle_connections
        )
        self.auth_service = auth_service or AuthService(config, self.http_client)
        self.credential_encoder = credential_encoder or SecurityCredentialEncoder(
            self.http_client,
            config.certificate_url,
            fingerprint=config.certificate_fingerprint
        )
        self.clock = clock

    def dispatch(self, request: DarajaRequest, timeout: Optional[float] = None) -> DarajaResponse:
        """
        Validate, authorise and send a request, then decode its response.

        Args:
            request: Any registered operation request; it is not modified
            timeout: Per-call timeout override in seconds, applied to each HTTP call

        Returns:
            The operation's typed response

        Raises:
            ValidationError: If a field breaks the operation's rules
            CredentialError: If the security credential cannot be generated
            AuthenticationError: If no bearer token could be obtained
            TransportError: On connection or read failures
            ProviderError: If the API answers with a non-200 status
            DecodeError: If a response body is not the expected JSON
        """
        operation = operation_for(request)

        error = validate_request(request)
        if error is not None:
            raise error

        request = self._authorise(operation, request, timeout)
        payload = request.to_payload()

        logger.info(f"Dispatching {operation.kind.value} to {operation.endpoint}")

        headers = self.auth_service.get_auth_header(timeout=timeout)
        response = self.http_client.post(
            endpoint=operation.endpoint,
            data=payload,
            headers=headers,
            timeout=timeout
        )

        return operation.response_type.from_payload(response)

    def _authorise(
        self,
        operation: Operation,
        request: DarajaRequest,
        timeout: Optional[float]
    ) -> DarajaRequest:
        """Return a copy of the request with its password or security credential filled in."""
        if operation.auth == OperationAuth.PASSWORD:
            timestamp, password = sign(
                request.business_short_code,
                request.pass_key,
                self.clock()
            )
            return replace(request, timestamp=timestamp, password=password)

        if operation.auth == OperationAuth.SECURITY_CREDENTIAL:
            credential = self.credential_encoder.encode(
                request.initiator_password,
                timeout=timeout
            )
            return replace(request, security_credential=credential)

        return request
