"""
Logging wrapper for DarajaClient.

Wrap a client to record every operation with its duration, its
non-secret request fields and the error it raised, if any:

    client = LoggingClient(DarajaClient.from_settings())
"""

import logging
import time
from dataclasses import fields
from typing import Any, Callable, Dict, Optional

from .client import DarajaClient
from .operations import operation_for
from .types import DarajaRequest, DarajaResponse, TokenResponse

logger = logging.getLogger(__name__)


def loggable_fields(request: DarajaRequest) -> Dict[str, Any]:
    """Wire name -> value for fields safe to log. Secrets and credentials are left out."""
    values = {}
    for f in fields(request):
        name = f.metadata.get('wire')
        if not name or not f.repr:
            continue
        value = getattr(request, f.name)
        if value is None or value == '':
            continue
        values[name] = getattr(value, 'value', value)
    return values


class LoggingClient:
    """
    DarajaClient decorator that logs each call.

    Successful calls are logged at INFO, failed ones at WARNING. Errors
    are always re-raised unchanged.
    """

    def __init__(self, client: DarajaClient, log: Optional[logging.Logger] = None):
        self.client = client
        self.logger = log or logger

    def _call(self, name: str, func: Callable, fields_: Dict[str, Any], *args, **kwargs):
        begin = time.monotonic()
        try:
            response = func(*args, **kwargs)
        except Exception as e:
            self.logger.warning(
                f"{name} failed after {time.monotonic() - begin:.3f}s: {e}",
                extra={'operation': name, 'fields': fields_, 'error': repr(e)}
            )
            raise

        self.logger.info(
            f"{name} completed in {time.monotonic() - begin:.3f}s {fields_}",
            extra={'operation': name, 'fields': fields_}
        )
        return response

    def token(self, timeout: Optional[float] = None) -> TokenResponse:
        return self._call('token', self.client.token, {}, timeout=timeout)

    def dispatch(self, request: DarajaRequest, timeout: Optional[float] = None) -> DarajaResponse:
        name = operation_for(request).kind.value
        return self._call(
            name,
            self.client.dispatch,
            loggable_fields(request),
            request,
            timeout=timeout
        )

    # Operation methods log through dispatch
    def express_simulate(self, request, timeout=None):
        return self.dispatch(request, timeout=timeout)

    def express_query(self, request, timeout=None):
        return self.dispatch(request, timeout=timeout)

    def b2c_payment(self, request, timeout=None):
        return self.dispatch(request, timeout=timeout)

    def account_balance(self, request, timeout=None):
        return self.dispatch(request, timeout=timeout)

    def c2b_register_url(self, request, timeout=None):
        return self.dispatch(request, timeout=timeout)

    def c2b_simulate(self, request, timeout=None):
        return self.dispatch(request, timeout=timeout)

    def generate_qr(self, request, timeout=None):
        return self.dispatch(request, timeout=timeout)

    def reverse(self, request, timeout=None):
        return self.dispatch(request, timeout=timeout)

    def transaction_status(self, request, timeout=None):
        return self.dispatch(request, timeout=timeout)

    def remit_tax(self, request, timeout=None):
        return self.dispatch(request, timeout=timeout)

    def business_paybill(self, request, timeout=None):
        return self.dispatch(request, timeout=timeout)

    def close(self):
        self.client.close()
