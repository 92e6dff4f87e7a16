"""
HTTP client for Daraja API communication.
"""

import logging
from typing import Any, Dict, Optional, Tuple

import requests
from requests.adapters import HTTPAdapter

from daraja.constants import DEFAULT_MAX_IDLE_CONNECTIONS, DEFAULT_TIMEOUT
from daraja.exceptions import DecodeError, ProviderError, TransportError

logger = logging.getLogger(__name__)

SENSITIVE_FIELDS = ('Password', 'SecurityCredential')


class HTTPClient:
    """
    HTTP client wrapper for Daraja API requests.
    Handles request/response, error classification and logging.

    Nothing is retried: a failed call raises immediately.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT,
        max_idle_connections: int = DEFAULT_MAX_IDLE_CONNECTIONS
    ):
        """
        Initialize HTTP client.

        Args:
            base_url: Base URL for API requests
            timeout: Connect and per-read timeout in seconds
            max_idle_connections: Connection pool size per host
        """
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = requests.Session()
        self.session.verify = True

        adapter = HTTPAdapter(
            pool_connections=max_idle_connections,
            pool_maxsize=max_idle_connections,
            max_retries=0
        )
        self.session.mount('https://', adapter)
        self.session.mount('http://', adapter)

    def _get_full_url(self, endpoint: str) -> str:
        """Get full URL for endpoint."""
        endpoint = endpoint.lstrip('/')
        return f"{self.base_url}/{endpoint}"

    def _default_headers(self, headers: Optional[Dict[str, str]]) -> Dict[str, str]:
        headers = dict(headers or {})
        headers.setdefault('Content-Type', 'application/json')
        headers.setdefault('Cache-Control', 'no-cache')
        return headers

    def _log_request(self, method: str, url: str, headers: Dict, data: Optional[Dict] = None):
        """Log API request details."""
        logger.info(f"Daraja API Request: {method} {url}")
        logger.debug(f"Headers: {self._sanitize_headers(headers)}")
        if data:
            logger.debug(f"Payload: {self._sanitize_payload(data)}")

    def _log_response(self, response: requests.Response):
        """Log API response details."""
        logger.info(f"Daraja API Response: {response.status_code}")
        logger.debug(f"Response: {response.text}")

    def _sanitize_headers(self, headers: Dict) -> Dict:
        """Remove sensitive data from headers for logging."""
        sanitized = headers.copy()
        if 'Authorization' in sanitized:
            scheme = sanitized['Authorization'].split(' ', 1)[0]
            sanitized['Authorization'] = f'{scheme} ***'
        return sanitized

    def _sanitize_payload(self, data: Dict) -> Dict:
        """Mask passwords and security credentials for logging."""
        return {
            key: '***' if key in SENSITIVE_FIELDS else value
            for key, value in data.items()
        }

    def _parse_json(self, response: requests.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise DecodeError(
                f"Failed to parse API response: {str(e)}",
                error_code=response.status_code,
                response_data=response.text
            )

    def _handle_response(self, response: requests.Response) -> Any:
        """
        Classify an API response.

        Args:
            response: Response object from requests

        Returns:
            Decoded JSON body of a 200 response

        Raises:
            ProviderError: If the status is anything but 200
            DecodeError: If the body (success or error) is not valid JSON
        """
        self._log_response(response)

        if response.status_code != 200:
            error_data = self._parse_json(response)
            if not isinstance(error_data, dict):
                raise DecodeError(
                    f"API request failed with status {response.status_code} "
                    f"and an unrecognised error body",
                    error_code=response.status_code,
                    response_data=response.text
                )

            raise ProviderError(
                request_id=error_data.get('requestId'),
                code=error_data.get('errorCode'),
                message=error_data.get('errorMessage'),
                status_code=response.status_code,
                response_data=error_data
            )

        return self._parse_json(response)

    def _send(self, method: str, url: str, timeout: Optional[float] = None, **kwargs) -> requests.Response:
        try:
            return self.session.request(
                method,
                url,
                timeout=timeout or self.timeout,
                **kwargs
            )
        except requests.RequestException as e:
            raise TransportError(f"Failed to send request: {str(e)}") from e

    def post(
        self,
        endpoint: str,
        data: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
        timeout: Optional[float] = None
    ) -> Any:
        """
        Make POST request to API.

        Args:
            endpoint: API endpoint path
            data: Request payload
            headers: Request headers
            timeout: Per-call timeout override in seconds

        Returns:
            Response data
        """
        url = self._get_full_url(endpoint)
        headers = self._default_headers(headers)

        self._log_request('POST', url, headers, data)

        response = self._send('POST', url, timeout=timeout, json=data, headers=headers)
        return self._handle_response(response)

    def get(
        self,
        endpoint: str,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
        auth: Optional[Tuple[str, str]] = None,
        timeout: Optional[float] = None
    ) -> Any:
        """
        Make GET request to API.

        Args:
            endpoint: API endpoint path
            params: Query parameters
            headers: Request headers
            auth: Optional (username, password) for HTTP Basic auth
            timeout: Per-call timeout override in seconds

        Returns:
            Response data
        """
        url = self._get_full_url(endpoint)
        headers = self._default_headers(headers)

        self._log_request('GET', url, headers)

        response = self._send('GET', url, timeout=timeout, params=params, headers=headers, auth=auth)
        return self._handle_response(response)

    def fetch(self, url: str, timeout: Optional[float] = None) -> bytes:
        """
        Download a document from an absolute URL, with TLS verification.

        Raises:
            TransportError: On network failure or a non-200 status
        """
        logger.info(f"Downloading {url}")

        response = self._send('GET', url, timeout=timeout)
        if response.status_code != 200:
            raise TransportError(
                f"Download of {url} failed with status {response.status_code}",
                error_code=response.status_code,
                response_data=response.text
            )
        return response.content

    def close(self):
        """Close the session."""
        self.session.close()
