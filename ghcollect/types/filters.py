"""Client-side date filtering of API resources."""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any

from ghcollect.dates import parse_timestamp, to_utc

DateBound = date | datetime


def _on_or_after(timestamp: datetime, bound: DateBound) -> bool:
    if isinstance(bound, datetime):
        return timestamp >= to_utc(bound)
    return timestamp.date() >= bound


def _on_or_before(timestamp: datetime, bound: DateBound) -> bool:
    if isinstance(bound, datetime):
        return timestamp <= to_utc(bound)
    return timestamp.date() <= bound


@dataclass(frozen=True)
class DateFilter:
    """
    Optional inclusive bounds on a resource's creation and completion times.

    "Completed" is ``closed_at`` for issues and ``merged_at`` for pull
    requests. A ``date`` bound is compared against the UTC calendar date of
    the timestamp; a ``datetime`` bound against the timestamp itself.
    """

    created_on_or_after: DateBound | None = None
    created_on_or_before: DateBound | None = None
    completed_on_or_after: DateBound | None = None
    completed_on_or_before: DateBound | None = None

    @property
    def has_completed_bound(self) -> bool:
        return self.completed_on_or_after is not None or self.completed_on_or_before is not None

    @property
    def is_empty(self) -> bool:
        return (
            self.created_on_or_after is None
            and self.created_on_or_before is None
            and not self.has_completed_bound
        )

    def matches(self, resource: dict[str, Any], completed_field: str) -> bool:
        """
        Return True if ``resource`` falls within every supplied bound.

        A resource that has not completed is rejected as soon as either
        completed bound is set.
        """
        if self.is_empty:
            return True

        created_at = parse_timestamp(resource.get("created_at"))
        if self.created_on_or_after is not None:
            if created_at is None or not _on_or_after(created_at, self.created_on_or_after):
                return False
        if self.created_on_or_before is not None:
            if created_at is None or not _on_or_before(created_at, self.created_on_or_before):
                return False

        if not self.has_completed_bound:
            return True

        completed_at = parse_timestamp(resource.get(completed_field))
        if completed_at is None:
            return False
        if self.completed_on_or_after is not None and not _on_or_after(
            completed_at, self.completed_on_or_after
        ):
            return False
        if self.completed_on_or_before is not None and not _on_or_before(
            completed_at, self.completed_on_or_before
        ):
            return False
        return True
