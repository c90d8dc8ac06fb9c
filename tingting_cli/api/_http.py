"""
Base HTTP client for TingTing API.

Handles session management, authentication and error handling.
"""

import logging
from typing import Optional, Dict, Any
from urllib.parse import urljoin

import requests

from .. import __version__
from ..config import ClientConfig, get_config
from ..exceptions import ApiError

logger = logging.getLogger(__name__)


class HTTPClient:
    """
    Base HTTP client for the TingTing API.

    Handles:
    - Session management
    - Bearer token resolution (instance token, then configured API token)
    - JSON decoding of responses
    - Translation of failures into ApiError
    """

    DEFAULT_HEADERS = {
        "Accept": "application/json",
        "Content-Type": "application/json",
    }

    def __init__(self, config: Optional[ClientConfig] = None):
        """
        Initialize the HTTP client.

        Args:
            config: Optional configuration. Read from the environment if not provided.
        """
        self.config = config or get_config()
        self._token: Optional[str] = None
        self._session: Optional[requests.Session] = None

    @property
    def session(self) -> requests.Session:
        """Get or create HTTP session."""
        if self._session is None:
            self._session = requests.Session()
            self._session.headers.update({
                "User-Agent": f"tingting-cli/{__version__}",
            })

        return self._session

    @property
    def base_url(self) -> str:
        """Get the base URL for API requests."""
        base_url = self.config.base_url
        if not base_url.endswith("/"):
            base_url += "/"
        return base_url

    @property
    def token(self) -> Optional[str]:
        """Token sent with requests: the instance token, else the configured API token."""
        if self._token is not None:
            return self._token
        return self.config.api_token

    def set_token(self, token: str) -> None:
        """Set the instance token. Takes precedence over the configured API token."""
        self._token = token

    def _get_headers(self, multipart: bool = False) -> Dict[str, str]:
        """Get request headers including authentication."""
        headers = dict(self.DEFAULT_HEADERS)

        # requests sets the multipart boundary itself
        if multipart:
            del headers["Content-Type"]

        token = self.token
        if token:
            headers["Authorization"] = f"Bearer {token}"

        return headers

    @staticmethod
    def _decode(response: requests.Response) -> Any:
        """Decode a successful response body. Empty or invalid JSON gives {}."""
        if not response.content:
            return {}
        try:
            data = response.json()
        except ValueError:
            logger.debug("Response body is not valid JSON, returning empty result")
            return {}
        return {} if data is None else data

    @staticmethod
    def _build_error(exc: requests.exceptions.RequestException) -> ApiError:
        """Translate a transport exception into ApiError."""
        message = str(exc)
        code = 0
        data = None

        response = exc.response
        if response is not None:
            code = response.status_code
            try:
                data = response.json()
            except ValueError:
                data = None
            if isinstance(data, dict) and data.get("message") is not None:
                message = str(data["message"])

        return ApiError(message, code, data)

    def request(
        self,
        method: str,
        endpoint: str,
        params: Optional[Dict[str, Any]] = None,
        json_data: Optional[Any] = None,
        files: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """
        Make an API request.

        Args:
            method: HTTP method
            endpoint: API endpoint (relative to base URL)
            params: Query parameters
            json_data: JSON body data
            files: Files for multipart upload

        Returns:
            Decoded response body

        Raises:
            ApiError: On HTTP error status, connection failure or an unsendable request
        """
        url = urljoin(self.base_url, endpoint.lstrip("/"))
        headers = self._get_headers(multipart=files is not None)

        try:
            request = requests.Request(
                method=method,
                url=url,
                params=params,
                json=json_data,
                files=files,
                headers=headers,
            )
            prepared = self.session.prepare_request(request)
            logger.debug(f"Request: {prepared.method} {prepared.url}")

            response = self.session.send(
                prepared,
                timeout=self.config.timeout,
                verify=self.config.verify_ssl,
            )
            logger.debug(f"Response: {response.status_code}")
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            error = self._build_error(e)
            logger.debug(f"Request failed: {method} {url} code={error.code} message={error.message}")
            raise error from e

        return self._decode(response)

    def close(self) -> None:
        """Close the HTTP session."""
        if self._session:
            self._session.close()
            self._session = None

    def __enter__(self) -> "HTTPClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
