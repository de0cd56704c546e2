"""Repository references parsed from URLs."""

from collections.abc import Iterable
from dataclasses import dataclass
from urllib.parse import urlsplit

from ghcollect.exceptions import InvalidArgumentError


@dataclass(frozen=True)
class RepositoryRef:
    """An (owner, name) pair identifying a repository."""

    owner: str
    name: str

    @classmethod
    def from_url(cls, url: str) -> "RepositoryRef":
        """
        Parse a repository reference from a URL-like string.

        Accepts "https://github.com/owner/name", "github.com/owner/name.git",
        "git@github.com:owner/name.git" and the bare "owner/name" form. Any
        path beyond the first two segments (e.g. "/issues") is ignored.

        Raises:
            InvalidArgumentError: If no owner/name pair can be found
        """
        text = url.strip()
        if "://" in text:
            path = urlsplit(text).path
        elif text.startswith("git@") and ":" in text:
            path = text.split(":", 1)[1]
        else:
            path = text

        segments = [segment for segment in path.split("/") if segment]
        # "github.com/owner/name" without a scheme
        if "://" not in text and segments and "." in segments[0] and len(segments) > 2:
            segments = segments[1:]

        if len(segments) < 2:
            raise InvalidArgumentError(f"Cannot parse owner/name from repository URL: {url!r}")

        owner, name = segments[0], segments[1]
        if name.endswith(".git"):
            name = name[: -len(".git")]
        return cls(owner=owner, name=name)

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"

    @property
    def api_path(self) -> str:
        return f"/repos/{self.owner}/{self.name}"

    def __str__(self) -> str:
        return self.full_name


def parse_repository_urls(repository_urls: str | Iterable[str]) -> list[RepositoryRef]:
    """Parse one URL or an iterable of URLs, keeping input order."""
    if isinstance(repository_urls, str):
        repository_urls = [repository_urls]
    return [RepositoryRef.from_url(url) for url in repository_urls]
