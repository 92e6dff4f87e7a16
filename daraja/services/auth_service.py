"""
Authentication service for the Daraja API.
Handles bearer token generation.
"""

import logging
from typing import Optional

from ..config import ClientConfig
from ..constants import APIEndpoints
from ..exceptions import AuthenticationError, DecodeError, ProviderError
from ..types import TokenResponse
from ..utils.http_client import HTTPClient

logger = logging.getLogger(__name__)


class AuthService:
    """
    Service for obtaining Daraja OAuth bearer tokens.

    A fresh token is requested for every call; tokens are not cached
    and their expiry is not tracked.
    """

    def __init__(self, config: ClientConfig, http_client: HTTPClient):
        self.config = config
        self.http_client = http_client

    def generate_token(self, timeout: Optional[float] = None) -> TokenResponse:
        """
        Generate a new access token using the client credentials grant.

        Returns:
            TokenResponse with access_token and expires_in

        Raises:
            AuthenticationError: If the token endpoint rejects the app credentials
            TransportError: If the token endpoint cannot be reached
            DecodeError: If the token body is malformed
        """
        logger.info("Generating new Daraja access token")

        try:
            response = self.http_client.get(
                endpoint=APIEndpoints.GENERATE_TOKEN,
                auth=(self.config.app_key, self.config.app_secret),
                timeout=timeout
            )
        except ProviderError as e:
            raise AuthenticationError(
                f"Failed to get token: {str(e)}",
                error_code=e.status_code,
                response_data=e.response_data
            ) from e
        except DecodeError as e:
            # A refused token request may come back with an empty or HTML body
            if e.error_code == 200:
                raise
            raise AuthenticationError(
                f"Failed to get token: HTTP {e.error_code}",
                error_code=e.error_code,
                response_data=e.response_data
            ) from e

        token = TokenResponse.from_payload(response)
        logger.debug(f"Access token issued (expires in {token.expires_in}s)")
        return token

    def get_auth_header(self, timeout: Optional[float] = None) -> dict:
        """
        Get authorization header for API requests.

        Returns:
            Dictionary with Authorization header
        """
        token = self.generate_token(timeout=timeout)
        return {'Authorization': f'Bearer {token.access_token}'}
