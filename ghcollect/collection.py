"""
Generic fetch-and-filter routine shared by the issue and pull request clients.

Every public collection operation is a variation of the same steps: build the
repository path, fetch one page, drop unwanted elements, apply a
``DateFilter``, and optionally aggregate the survivors into weekly buckets or
a per-repository ranking.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from datetime import date
from typing import TYPE_CHECKING, Any

from ghcollect.dates import week_windows
from ghcollect.exceptions import InvalidArgumentError
from ghcollect.logging import get_logger
from ghcollect.types.filters import DateBound, DateFilter
from ghcollect.types.repos import parse_repository_urls
from ghcollect.types.reports import TOTAL, RankingEntry, WeeklyBucket

if TYPE_CHECKING:
    from ghcollect.transport import HTTPTransport

logger = get_logger()

STATES = ("open", "closed", "all")

# Maximum items GitHub returns in one page
PAGE_SIZE_CAP = 100


@dataclass(frozen=True)
class ResourceKind:
    """How one repository collection is fetched and filtered."""

    endpoint: str  # path segment under /repos/{owner}/{name}
    completed_field: str  # "closed_at" or "merged_at"
    completed_label: str  # "closed" or "merged"
    exclude: Callable[[dict[str, Any]], bool] | None = None


def is_pull_request(item: dict[str, Any]) -> bool:
    """GitHub lists pull requests as issues carrying a ``pull_request`` key."""
    return item.get("pull_request") is not None


ISSUES = ResourceKind(
    endpoint="issues",
    completed_field="closed_at",
    completed_label="closed",
    exclude=is_pull_request,
)
PULLS = ResourceKind(
    endpoint="pulls",
    completed_field="merged_at",
    completed_label="merged",
)


def validate_state(state: str) -> None:
    if state not in STATES:
        raise InvalidArgumentError(
            f"state must be one of {', '.join(STATES)}; got {state!r}"
        )


def warn_if_truncated(items: list[Any], what: str, per_page: int = PAGE_SIZE_CAP) -> None:
    """Log a warning when a single page came back full."""
    if len(items) >= per_page:
        logger.warning(
            "%s returned %d items, the per-page maximum. Pagination is not "
            "supported, so the results may be incomplete.",
            what,
            len(items),
        )


def fetch_filtered(
    transport: "HTTPTransport",
    kind: ResourceKind,
    repository_urls: str | Iterable[str],
    state: str,
    date_filter: DateFilter,
    token: str | None = None,
) -> list[dict[str, Any]]:
    """
    Fetch one page of ``kind`` per repository and return the filtered union.

    Results are concatenated in input order. Repositories are queried one at
    a time.
    """
    validate_state(state)
    refs = parse_repository_urls(repository_urls)

    results: list[dict[str, Any]] = []
    for ref in refs:
        items = transport.get_collection(
            f"{ref.api_path}/{kind.endpoint}",
            params={"state": state},
            token=token,
        )
        kept = [
            item
            for item in items
            if not (kind.exclude and kind.exclude(item))
            and date_filter.matches(item, kind.completed_field)
        ]
        logger.debug(
            "%s %s: %d fetched, %d kept", ref.full_name, kind.endpoint, len(items), len(kept)
        )
        results.extend(kept)
    return results


def weekly_histogram(
    transport: "HTTPTransport",
    kind: ResourceKind,
    repository_urls: str | Iterable[str],
    number_of_weeks: int = 12,
    data_type: str = "created",
    today: date | None = None,
    token: str | None = None,
) -> list[WeeklyBucket]:
    """
    Count resources created or completed in each of the trailing weeks.

    Returns ``number_of_weeks`` buckets, most recent first, followed by a
    ``"total"`` bucket holding their sum.
    """
    if number_of_weeks < 1:
        raise InvalidArgumentError("number_of_weeks must be at least 1")
    if data_type not in ("created", kind.completed_label):
        raise InvalidArgumentError(
            f"data_type must be 'created' or '{kind.completed_label}'; got {data_type!r}"
        )

    # Parse up front so a bad URL fails before any request is made
    refs = [ref.full_name for ref in parse_repository_urls(repository_urls)]

    buckets: list[WeeklyBucket] = []
    for week_start, week_end in week_windows(number_of_weeks, today):
        if data_type == "created":
            date_filter = DateFilter(created_on_or_after=week_start, created_on_or_before=week_end)
        else:
            date_filter = DateFilter(completed_on_or_after=week_start, completed_on_or_before=week_end)

        matches = fetch_filtered(transport, kind, refs, "all", date_filter, token)
        buckets.append(WeeklyBucket(week_start=week_start, count=len(matches)))

    buckets.append(WeeklyBucket(week_start=TOTAL, count=sum(b.count for b in buckets)))
    return buckets


def top_ranking(
    transport: "HTTPTransport",
    kind: ResourceKind,
    repository_urls: str | Iterable[str],
    state: str = "open",
    created_on_or_after: DateBound | None = None,
    completed_on_or_after: DateBound | None = None,
    token: str | None = None,
) -> list[RankingEntry]:
    """
    Rank repositories by number of matching resources, highest first.

    Ties keep the order in which repositories were given.

    Raises:
        InvalidArgumentError: If a completed bound is combined with state "open"
    """
    if state == "open" and completed_on_or_after is not None:
        raise InvalidArgumentError(
            f"{kind.completed_label}OnOrAfter cannot be specified if state is open"
        )
    validate_state(state)

    date_filter = DateFilter(
        created_on_or_after=created_on_or_after,
        completed_on_or_after=completed_on_or_after,
    )

    entries = []
    for ref in parse_repository_urls(repository_urls):
        matches = fetch_filtered(transport, kind, ref.full_name, state, date_filter, token)
        entries.append(RankingEntry(repository_name=ref.name, count=len(matches)))

    # sorted() is stable, so equal counts keep input order
    return sorted(entries, key=lambda entry: entry.count, reverse=True)
