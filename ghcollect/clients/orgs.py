"""Organization resource client: members and teams."""

from typing import TYPE_CHECKING, Any

from ghcollect.collection import PAGE_SIZE_CAP, warn_if_truncated
from ghcollect.exceptions import NotFoundError

if TYPE_CHECKING:
    from ghcollect.transport import HTTPTransport


class OrgsClient:
    """Client for organization member and team queries."""

    def __init__(self, transport: "HTTPTransport") -> None:
        """
        Initialize the orgs client.

        Args:
            transport: HTTP transport for making requests
        """
        self.transport = transport

    def members(self, organization: str, token: str | None = None) -> list[dict[str, Any]]:
        """
        List members of an organization.

        Only the first 100 members are returned; a warning is logged when the
        page is full.

        Args:
            organization: Organization login
            token: Credential for this call (default: the client's token)

        Returns:
            Raw user objects

        Raises:
            NotFoundError: If the organization does not exist
        """
        return self._fetch_page(f"/orgs/{organization}/members", f"Members of {organization}", token)

    def teams(self, organization: str, token: str | None = None) -> list[dict[str, Any]]:
        """
        List teams of an organization.

        Only the first 100 teams are returned; a warning is logged when the
        page is full.

        Args:
            organization: Organization login
            token: Credential for this call (default: the client's token)

        Returns:
            Raw team objects
        """
        return self._fetch_page(f"/orgs/{organization}/teams", f"Teams of {organization}", token)

    def team_members(
        self,
        organization: str,
        team_name: str,
        token: str | None = None,
    ) -> list[dict[str, Any]]:
        """
        List members of a team.

        The team is looked up by name (case-insensitive) or slug among the
        organization's teams, then its members are fetched by team id.

        Args:
            organization: Organization login
            team_name: Team name or slug
            token: Credential for this call (default: the client's token)

        Returns:
            Raw user objects

        Raises:
            NotFoundError: If no team with that name exists in the organization
        """
        team = self._find_team(organization, team_name, token)
        return self._fetch_page(
            f"/teams/{team['id']}/members",
            f"Members of team {team_name}",
            token,
        )

    def _find_team(self, organization: str, team_name: str, token: str | None) -> dict[str, Any]:
        wanted = team_name.lower()
        for team in self.teams(organization, token=token):
            if (team.get("name") or "").lower() == wanted or team.get("slug") == team_name:
                return team
        raise NotFoundError(
            "TEAM_NOT_FOUND",
            f"Team {team_name!r} not found in organization {organization!r}",
        )

    def _fetch_page(self, path: str, what: str, token: str | None) -> list[dict[str, Any]]:
        items = self.transport.get_collection(path, params={"per_page": PAGE_SIZE_CAP}, token=token)
        warn_if_truncated(items, what)
        return items
