"""HTTP request layer for the Spotify Web API."""

import logging
from typing import Any, Dict, Optional

import httpx

from .exceptions import MissingParamError, UnexpectedError, error_for_status

logger = logging.getLogger(__name__)

API_BASE_URL = "https://api.spotify.com/v1"


class RestClient:
    """Synchronous HTTP client issuing single Spotify Web API calls.

    Every call builds a URL and query string, sends one request with the
    bearer token, and returns the decoded JSON body. Error responses are
    mapped to typed exceptions. Nothing is retried.

    Attributes:
        token: OAuth access token sent as a bearer token
        base_url: API root (default: https://api.spotify.com/v1)
        client: httpx.Client for HTTP requests

    Example:
        >>> rest = RestClient("access-token")
        >>> me = rest.request("GET", "/me")
        >>> rest.close()
    """

    def __init__(self, token: str, base_url: str = API_BASE_URL, timeout: float = 30.0):
        """Initialize the request layer.

        Args:
            token: OAuth access token
            base_url: API root URL
            timeout: Read timeout in seconds

        Raises:
            MissingParamError: If token is empty
        """
        if not token:
            raise MissingParamError("missing token")

        self.token = token
        self.base_url = base_url.rstrip("/")

        self.client = httpx.Client(
            timeout=httpx.Timeout(
                timeout,
                connect=10.0,  # 10s connection timeout
                pool=5.0,  # 5s pool acquisition timeout
            ),
            limits=httpx.Limits(
                max_connections=100,
                max_keepalive_connections=20,
                keepalive_expiry=5.0,
            ),
            headers={"Accept": "application/json"},
            follow_redirects=True,
        )

        logger.debug(f"Initialized Spotify request layer for {self.base_url}")

    def set_token(self, token: str):
        """Replace the bearer token used for subsequent requests."""
        if not token:
            raise MissingParamError("missing token")
        self.token = token

    def _build_url(self, path: str) -> str:
        """Build full URL for an API path.

        Args:
            path: Endpoint path (e.g. "/tracks/123") or an absolute URL
                such as a paging "next" link

        Returns:
            Absolute URL
        """
        if path.startswith(("http://", "https://")):
            return path
        return f"{self.base_url}/{path.lstrip('/')}"

    def _build_headers(self) -> Dict[str, str]:
        return {"Authorization": f"Bearer {self.token}"}

    @staticmethod
    def _build_params(params: Optional[Dict[str, Any]]) -> Dict[str, str]:
        """Render query parameters the way the API expects them.

        None values are dropped, booleans become "true"/"false" and
        sequences are joined with commas.
        """
        rendered: Dict[str, str] = {}
        for key, value in (params or {}).items():
            if value is None:
                continue
            if isinstance(value, bool):
                rendered[key] = "true" if value else "false"
            elif isinstance(value, (list, tuple, set)):
                rendered[key] = ",".join(str(v) for v in value)
            else:
                rendered[key] = str(value)
        return rendered

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        """Extract the error message from an error response body."""
        try:
            body = response.json()
        except ValueError:
            return response.text or f"HTTP {response.status_code}"

        error = body.get("error") if isinstance(body, dict) else None
        if isinstance(error, dict):
            return error.get("message") or f"HTTP {response.status_code}"
        if isinstance(error, str):
            description = body.get("error_description")
            return f"{error}: {description}" if description else error
        return f"HTTP {response.status_code}"

    def _handle_response(self, response: httpx.Response) -> Any:
        """Parse and validate a Spotify Web API response.

        Args:
            response: HTTP response from the API

        Returns:
            Decoded JSON body, or None for an empty body

        Raises:
            SpotifyBadRequestError: For 400 responses
            SpotifyAuthenticationError: For 401 responses
            SpotifyAuthorizationError: For 403 responses
            SpotifyNotFoundError: For 404 responses
            SpotifyRateLimitError: For 429 responses
            UnexpectedError: For other error statuses and undecodable JSON
        """
        status = response.status_code

        if status >= 400:
            message = self._error_message(response)
            retry_after = None
            if status == 429:
                try:
                    retry_after = float(response.headers.get("Retry-After", ""))
                except ValueError:
                    retry_after = None
            logger.error(f"Spotify API error {status}: {message}")
            raise error_for_status(status, message, retry_after=retry_after)

        if status == 204 or not response.content:
            return None

        try:
            return response.json()
        except ValueError as e:
            raise UnexpectedError(status, f"Response was not JSON: {response.text[:200]}") from e

    def request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Any] = None,
    ) -> Any:
        """Perform one API call and return the decoded JSON body.

        Args:
            method: HTTP method ("GET", "POST", "PUT", "DELETE")
            path: Endpoint path or absolute URL
            params: Query parameters (see _build_params)
            json: Optional JSON request body

        Returns:
            Decoded JSON body, or None for empty responses

        Raises:
            SpotifyError: For API error responses
            httpx.HTTPError: For network errors
        """
        url = self._build_url(path)
        query = self._build_params(params)

        logger.debug(f"{method.upper()} {url} params={query}")
        response = self.client.request(
            method.upper(),
            url,
            params=query,
            json=json,
            headers=self._build_headers(),
        )
        return self._handle_response(response)

    def close(self):
        """Close HTTP client and release resources."""
        self.client.close()
        logger.debug("Closed Spotify request layer")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
