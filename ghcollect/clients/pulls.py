"""Pull requests resource client."""

from collections.abc import Iterable
from datetime import date
from typing import TYPE_CHECKING, Any

from ghcollect.collection import PULLS, fetch_filtered, top_ranking, weekly_histogram
from ghcollect.types.filters import DateBound, DateFilter
from ghcollect.types.reports import RankingEntry, WeeklyBucket

if TYPE_CHECKING:
    from ghcollect.transport import HTTPTransport


class PullsClient:
    """Client for repository pull request queries."""

    def __init__(self, transport: "HTTPTransport") -> None:
        """
        Initialize the pulls client.

        Args:
            transport: HTTP transport for making requests
        """
        self.transport = transport

    def weekly(
        self,
        repository_urls: str | Iterable[str],
        number_of_weeks: int = 12,
        data_type: str = "created",
        today: date | None = None,
        token: str | None = None,
    ) -> list[WeeklyBucket]:
        """
        Count pull requests created or merged in each trailing week.

        Args:
            repository_urls: Repository URL or URLs
            number_of_weeks: How many weeks to look back (default: 12)
            data_type: "created" or "merged" (default: "created")
            today: Last day of the most recent week (default: today, UTC)
            token: Credential for this call

        Returns:
            number_of_weeks buckets, most recent first, then a "total" bucket
        """
        return weekly_histogram(
            self.transport, PULLS, repository_urls, number_of_weeks, data_type, today, token
        )

    def top(
        self,
        repository_urls: str | Iterable[str],
        state: str = "open",
        created_on_or_after: DateBound | None = None,
        merged_on_or_after: DateBound | None = None,
        token: str | None = None,
    ) -> list[RankingEntry]:
        """
        Rank repositories by number of matching pull requests.

        Raises:
            InvalidArgumentError: If merged_on_or_after is given with state "open"
        """
        return top_ranking(
            self.transport,
            PULLS,
            repository_urls,
            state,
            created_on_or_after,
            merged_on_or_after,
            token,
        )

    def list(
        self,
        repository_urls: str | Iterable[str],
        state: str = "open",
        created_on_or_after: DateBound | None = None,
        created_on_or_before: DateBound | None = None,
        merged_on_or_after: DateBound | None = None,
        merged_on_or_before: DateBound | None = None,
        token: str | None = None,
    ) -> list[dict[str, Any]]:
        """
        List pull requests across one or more repositories.

        A merged bound drops pull requests that were never merged, including
        ones that were closed without merging.

        Args:
            repository_urls: Repository URL or URLs
            state: "open", "closed" or "all" (default: "open")
            created_on_or_after: Keep pull requests created on or after this date
            created_on_or_before: Keep pull requests created on or before this date
            merged_on_or_after: Keep pull requests merged on or after this date
            merged_on_or_before: Keep pull requests merged on or before this date
            token: Credential for this call (default: the client's token)

        Returns:
            Raw pull request objects, in repository input order
        """
        date_filter = DateFilter(
            created_on_or_after=created_on_or_after,
            created_on_or_before=created_on_or_before,
            completed_on_or_after=merged_on_or_after,
            completed_on_or_before=merged_on_or_before,
        )
        return fetch_filtered(self.transport, PULLS, repository_urls, state, date_filter, token)
