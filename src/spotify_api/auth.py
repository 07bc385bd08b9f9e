"""Spotify Accounts service helpers.

This module wraps the token endpoint so callers can obtain an access token
to pass to SpotifyClient. It does not schedule refreshes or validate scopes.

Token flows:
    1. Client credentials: app-only token for public catalog data
    2. Authorization code: exchange the code from the redirect for a user
       token (required by UserClient)
    3. Refresh: trade a refresh token for a new access token

Example:
    >>> from spotify_api.auth import get_client_credentials_token
    >>> token = get_client_credentials_token("client-id", "client-secret")
    >>> client = SpotifyClient(token.access_token)
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional
from urllib.parse import urlencode

import httpx

from .exceptions import MissingParamError, SpotifyAuthenticationError

logger = logging.getLogger(__name__)

ACCOUNTS_URL = "https://accounts.spotify.com"
TOKEN_URL = f"{ACCOUNTS_URL}/api/token"
AUTHORIZE_URL = f"{ACCOUNTS_URL}/authorize"


@dataclass
class AccessToken:
    """Access token issued by the Accounts service.

    Attributes:
        access_token: Bearer token for the Web API
        token_type: Always "Bearer"
        expires_in: Lifetime in seconds
        scope: Space-separated granted scopes (user tokens only)
        refresh_token: Refresh token (authorization code flow only)
        created_at: Unix time the token was received
    """

    access_token: str
    token_type: str = "Bearer"
    expires_in: int = 3600
    scope: Optional[str] = None
    refresh_token: Optional[str] = None
    created_at: float = field(default_factory=time.time)

    @property
    def expires_at(self) -> float:
        return self.created_at + self.expires_in

    def is_expired(self, margin: float = 0.0) -> bool:
        """Check if token has expired (optionally margin seconds early)."""
        return time.time() + margin >= self.expires_at


def _request_token(client_id: str, client_secret: str, data: Dict[str, str]) -> AccessToken:
    """POST to the token endpoint with HTTP basic client authentication.

    Raises:
        MissingParamError: If client credentials are empty
        SpotifyAuthenticationError: If the Accounts service rejects the request
            or cannot be reached
    """
    if not client_id or not client_secret:
        raise MissingParamError("missing client id or client secret")

    logger.debug(f"Requesting {data.get('grant_type')} token")
    try:
        response = httpx.post(TOKEN_URL, data=data, auth=(client_id, client_secret), timeout=30.0)
    except httpx.HTTPError as e:
        logger.error(f"Token request failed: {e}")
        raise SpotifyAuthenticationError(0, f"Token request failed: {e}") from e

    try:
        body = response.json()
    except ValueError:
        body = {}

    if response.status_code >= 400:
        error = body.get("error", f"HTTP {response.status_code}")
        description = body.get("error_description")
        message = f"{error}: {description}" if description else str(error)
        logger.error(f"Token request failed: {message}")
        raise SpotifyAuthenticationError(response.status_code, message)

    if "access_token" not in body:
        raise SpotifyAuthenticationError(response.status_code, "Token response had no access_token")

    return AccessToken(
        access_token=body["access_token"],
        token_type=body.get("token_type", "Bearer"),
        expires_in=int(body.get("expires_in", 3600)),
        scope=body.get("scope"),
        # Refresh responses may omit the refresh token; callers keep the old one
        refresh_token=body.get("refresh_token"),
    )


def get_client_credentials_token(client_id: str, client_secret: str) -> AccessToken:
    """Get an app-only token with the client credentials flow."""
    return _request_token(client_id, client_secret, {"grant_type": "client_credentials"})


def get_user_token(client_id: str, client_secret: str, code: str, redirect_uri: str) -> AccessToken:
    """Exchange an authorization code for a user token."""
    if not code:
        raise MissingParamError("missing authorization code")
    return _request_token(
        client_id,
        client_secret,
        {"grant_type": "authorization_code", "code": code, "redirect_uri": redirect_uri},
    )


def refresh_user_token(client_id: str, client_secret: str, refresh_token: str) -> AccessToken:
    """Get a new user token from a refresh token.

    The returned token carries the previous refresh token when the
    Accounts service does not rotate it.
    """
    if not refresh_token:
        raise MissingParamError("missing refresh token")
    token = _request_token(
        client_id,
        client_secret,
        {"grant_type": "refresh_token", "refresh_token": refresh_token},
    )
    if token.refresh_token is None:
        token.refresh_token = refresh_token
    return token


def build_authorize_url(
    client_id: str,
    redirect_uri: str,
    scopes: Iterable[str] = (),
    state: Optional[str] = None,
    show_dialog: bool = False,
) -> str:
    """Build the URL the user visits to grant access.

    Examples:
        >>> build_authorize_url("abc", "http://localhost:8888/callback", ["user-library-read"])
        'https://accounts.spotify.com/authorize?client_id=abc&response_type=code&redirect_uri=http%3A%2F%2Flocalhost%3A8888%2Fcallback&scope=user-library-read'
    """
    if not client_id or not redirect_uri:
        raise MissingParamError("missing client id or redirect uri")

    params = {
        "client_id": client_id,
        "response_type": "code",
        "redirect_uri": redirect_uri,
    }
    scopes = list(scopes)
    if scopes:
        params["scope"] = " ".join(scopes)
    if state:
        params["state"] = state
    if show_dialog:
        params["show_dialog"] = "true"

    return f"{AUTHORIZE_URL}?{urlencode(params)}"
