"""ghcollect type definitions.

This module exports the value objects used by the clients. API resources
themselves are passed through as plain JSON dictionaries.
"""

from ghcollect.types.filters import DateFilter
from ghcollect.types.repos import RepositoryRef, parse_repository_urls
from ghcollect.types.reports import TOTAL, RankingEntry, WeeklyBucket

__all__ = [
    "RepositoryRef",
    "parse_repository_urls",
    "DateFilter",
    "WeeklyBucket",
    "RankingEntry",
    "TOTAL",
]
