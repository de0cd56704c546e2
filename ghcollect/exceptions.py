"""ghcollect exception classes."""

from datetime import datetime


class GitHubError(Exception):
    """Base exception for all ghcollect errors."""

    def __init__(
        self,
        code: str,
        message: str,
        status_code: int | None = None,
        url: str | None = None,
    ) -> None:
        self.code = code
        self.message = message
        self.status_code = status_code
        self.url = url
        super().__init__(f"[{code}] {message}")


class ConfigurationError(GitHubError):
    """Raised when client configuration is invalid or missing."""

    def __init__(self, message: str) -> None:
        super().__init__("CONFIGURATION_ERROR", message)


class InvalidArgumentError(GitHubError, ValueError):
    """Raised when a caller passes contradictory or malformed arguments."""

    def __init__(self, message: str) -> None:
        super().__init__("INVALID_ARGUMENT", message)


class AuthenticationError(GitHubError):
    """Raised when the token is missing or rejected (401)."""

    pass


class AuthorizationError(GitHubError):
    """Raised when access is denied (403)."""

    pass


class NotFoundError(GitHubError):
    """Raised when a repository, organization or team is not found."""

    pass


class RateLimitedError(GitHubError):
    """Raised when the API quota is exhausted. Never retried."""

    def __init__(
        self,
        code: str,
        message: str,
        reset_at: datetime | None = None,
        status_code: int | None = None,
        url: str | None = None,
    ) -> None:
        super().__init__(code, message, status_code, url)
        self.reset_at = reset_at


class ValidationError(GitHubError):
    """Raised when GitHub rejects the request parameters (422, other 4xx)."""

    pass


class ServerError(GitHubError):
    """Raised on server errors (5xx)."""

    pass
