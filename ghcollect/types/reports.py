"""Aggregate results: weekly buckets and repository rankings."""

from dataclasses import dataclass
from datetime import date

TOTAL = "total"


@dataclass(frozen=True)
class WeeklyBucket:
    """Count of matching resources in one trailing week, or the grand total."""

    week_start: date | str  # first day of the week, or "total"
    count: int

    @property
    def is_total(self) -> bool:
        return self.week_start == TOTAL


@dataclass(frozen=True)
class RankingEntry:
    """Number of matching resources in one repository."""

    repository_name: str
    count: int
