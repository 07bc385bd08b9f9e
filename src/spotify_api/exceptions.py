"""Exception classes for Spotify Web API client."""

import logging
from typing import Any, Optional

import httpx

logger = logging.getLogger(__name__)


class SpotifyError(Exception):
    """Base exception for all Spotify Web API errors.

    Attributes:
        status: HTTP status code (0 when the error never reached the server)
        message: Error message from server or client
    """

    def __init__(self, status: int, message: str):
        """Initialize Spotify error.

        Args:
            status: HTTP status code returned by the API, 0 for local errors
            message: Human-readable error message
        """
        self.status = status
        self.message = message
        super().__init__(f"Spotify Error {status}: {message}")


class MissingParamError(SpotifyError, ValueError):
    """Required parameter missing.

    Raised before any request is made when an id, query, token or id list
    is empty.
    """

    def __init__(self, message: str):
        super().__init__(0, message)


class UnexpectedError(SpotifyError):
    """Upstream failure that does not map to a more specific error.

    Raised for 5xx responses, unclassified 4xx responses, transport errors
    and undecodable payloads.
    """

    pass


class SpotifyBadRequestError(SpotifyError):
    """Malformed request (HTTP 400)."""

    pass


class SpotifyAuthenticationError(SpotifyError):
    """Bad or expired token (HTTP 401), or token endpoint failure."""

    pass


class SpotifyAuthorizationError(SpotifyError):
    """Token lacks the scope or product for this action (HTTP 403)."""

    pass


class SpotifyNotFoundError(SpotifyError):
    """Requested resource not found (HTTP 404).

    Raised when a track, album, playlist or other resource does not exist.
    """

    pass


class SpotifyRateLimitError(SpotifyError):
    """Too many requests (HTTP 429).

    The client does not retry; callers can read retry_after and decide.
    """

    def __init__(self, status: int, message: str, retry_after: Optional[float] = None):
        self.retry_after = retry_after
        super().__init__(status, message)


STATUS_ERRORS = {
    400: SpotifyBadRequestError,
    401: SpotifyAuthenticationError,
    403: SpotifyAuthorizationError,
    404: SpotifyNotFoundError,
}


def error_for_status(status: int, message: str, retry_after: Optional[float] = None) -> SpotifyError:
    """Build the typed exception for an HTTP error status.

    Examples:
        >>> type(error_for_status(404, "Non existing id")).__name__
        'SpotifyNotFoundError'
        >>> type(error_for_status(502, "Bad gateway")).__name__
        'UnexpectedError'
    """
    if status == 429:
        return SpotifyRateLimitError(status, message, retry_after=retry_after)
    return STATUS_ERRORS.get(status, UnexpectedError)(status, message)


def handle_error(error: Exception, default: Any = None) -> Any:
    """Shared error handler for manager read calls.

    Not-found errors resolve to ``default`` so lookups of unknown ids return
    an empty value. Every other Spotify error propagates. Transport errors
    from httpx are wrapped in UnexpectedError.

    Args:
        error: Exception caught around a request
        default: Value returned when the error resolves instead of raising

    Returns:
        ``default`` for not-found errors

    Raises:
        SpotifyError: For every error that does not resolve to the default
    """
    if isinstance(error, SpotifyNotFoundError):
        logger.debug(f"Resource not found, returning default: {error.message}")
        return default

    if isinstance(error, SpotifyError):
        raise error

    if isinstance(error, httpx.HTTPError):
        logger.error(f"Spotify request failed: {error}")
        raise UnexpectedError(0, str(error)) from error

    raise error
