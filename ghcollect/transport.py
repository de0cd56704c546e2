"""
HTTP Transport for ghcollect.

Issues single GET requests against the GitHub REST API, attaches the token,
and parses error responses into typed exceptions. There is no
retry loop: a failed request fails the call.
"""

import time
from datetime import datetime, timezone
from typing import Any

import httpx

from ghcollect.exceptions import (
    AuthenticationError,
    AuthorizationError,
    GitHubError,
    NotFoundError,
    RateLimitedError,
    ServerError,
    ValidationError,
)
from ghcollect.logging import get_logger, log_http_request, log_http_response

logger = get_logger()

# Statuses GitHub uses for "nothing to return yet" on statistics endpoints
_EMPTY_STATUSES = (202, 204)


class HTTPTransport:
    """
    HTTP transport layer for the GitHub REST API.

    Handles:
    - Token attachment as the ``access_token`` query parameter
    - Request/response debug logging with the token masked
    - Error response parsing into typed exceptions

    Network failures (``httpx.RequestError``) are not caught and surface to
    the caller unchanged.
    """

    def __init__(
        self,
        base_url: str,
        token: str | None = None,
        timeout: float = 30.0,
        user_agent: str = "ghcollect",
    ) -> None:
        """
        Initialize HTTP transport.

        Args:
            base_url: Base URL for API requests (e.g., "https://api.github.com")
            token: Default credential attached to every request (optional)
            timeout: Request timeout in seconds
            user_agent: Value for the User-Agent header
        """
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.timeout = timeout

        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=timeout,
            headers={
                "Accept": "application/vnd.github+json",
                "User-Agent": user_agent,
            },
        )

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self) -> "HTTPTransport":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def get(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        token: str | None = None,
    ) -> Any:
        """
        Make a GET request and return the decoded JSON body.

        Args:
            path: API path (e.g., "/repos/octo/hello/issues")
            params: Query parameters
            token: Credential for this call; falls back to the transport default

        Returns:
            Parsed JSON response, or an empty list for 202/204 responses

        Raises:
            GitHubError: On API error statuses
            httpx.RequestError: On network failures
        """
        query = dict(params or {})
        credential = token if token is not None else self.token
        if credential:
            query["access_token"] = credential

        log_http_request("GET", f"{self.base_url}{path}", query)
        started = time.monotonic()
        response = self._client.request("GET", path, params=query or None)
        elapsed_ms = (time.monotonic() - started) * 1000

        if response.status_code >= 400:
            log_http_response(response.status_code, str(response.url), elapsed_ms=elapsed_ms)
            raise self._parse_error_response(response)

        if response.status_code in _EMPTY_STATUSES or not response.content:
            logger.info(
                "GitHub returned %s with no content for %s; treating as empty",
                response.status_code,
                path,
            )
            log_http_response(response.status_code, str(response.url), 0, elapsed_ms)
            return []

        data = response.json()
        log_http_response(
            response.status_code,
            str(response.url),
            len(data) if isinstance(data, list) else None,
            elapsed_ms,
        )
        return data

    def get_collection(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        token: str | None = None,
    ) -> list[dict[str, Any]]:
        """
        Make a GET request whose body must be a JSON array.

        Raises:
            GitHubError: If the body is not a JSON array
        """
        data = self.get(path, params=params, token=token)
        if not isinstance(data, list):
            raise GitHubError(
                "UNEXPECTED_RESPONSE",
                f"Expected a JSON array from {path}, got {type(data).__name__}",
                url=path,
            )
        return data

    def _parse_error_response(self, response: httpx.Response) -> GitHubError:
        """
        Parse an error response into a typed exception.

        Args:
            response: HTTP response with error status

        Returns:
            Appropriate GitHubError subclass
        """
        try:
            data = response.json()
        except ValueError:
            data = {}
        if not isinstance(data, dict):
            data = {}

        message = data.get("message") or f"HTTP {response.status_code}"
        status_code = response.status_code
        # Never carry the token into exception text
        url = response.request.url.copy_remove_param("access_token")
        url_str = str(url)

        if status_code == 429 or (
            status_code == 403 and response.headers.get("X-RateLimit-Remaining") == "0"
        ):
            reset_at = None
            reset_header = response.headers.get("X-RateLimit-Reset")
            if reset_header:
                try:
                    reset_at = datetime.fromtimestamp(int(reset_header), tz=timezone.utc)
                except ValueError:
                    reset_at = None
            return RateLimitedError("RATE_LIMITED", message, reset_at, status_code, url_str)
        elif status_code == 401:
            return AuthenticationError("UNAUTHORIZED", message, status_code, url_str)
        elif status_code == 403:
            return AuthorizationError("FORBIDDEN", message, status_code, url_str)
        elif status_code == 404:
            return NotFoundError("NOT_FOUND", message, status_code, url_str)
        elif status_code >= 500:
            return ServerError("SERVER_ERROR", message, status_code, url_str)
        else:
            return ValidationError("VALIDATION_ERROR", message, status_code, url_str)
