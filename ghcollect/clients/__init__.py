"""ghcollect resource clients."""

from ghcollect.clients.issues import IssuesClient
from ghcollect.clients.orgs import OrgsClient
from ghcollect.clients.pulls import PullsClient
from ghcollect.clients.repos import ReposClient, unique_contributors

__all__ = [
    "IssuesClient",
    "PullsClient",
    "ReposClient",
    "OrgsClient",
    "unique_contributors",
]
