"""Timestamp parsing and trailing week windows."""

from datetime import date, datetime, timedelta, timezone

WEEK = timedelta(days=7)


def parse_timestamp(value: str | None) -> datetime | None:
    """Parse a GitHub ISO 8601 timestamp ("2020-01-15T10:30:00Z") as aware UTC."""
    if not value:
        return None
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    return to_utc(parsed)


def to_utc(value: datetime) -> datetime:
    """Normalize a datetime to aware UTC. Naive values are taken as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def utc_today() -> date:
    return datetime.now(timezone.utc).date()


def week_boundaries(number_of_weeks: int, today: date | None = None) -> list[date]:
    """
    Return ``number_of_weeks + 1`` boundaries, most recent first.

    The first boundary is ``today``; each following one is seven days
    earlier. Successive pairs delimit one trailing week.
    """
    end = today or utc_today()
    return [end - WEEK * i for i in range(number_of_weeks + 1)]


def week_windows(number_of_weeks: int, today: date | None = None) -> list[tuple[date, date]]:
    """
    Return ``(first_day, last_day)`` pairs for trailing weeks, most recent first.

    Both days are inclusive and consecutive windows never overlap.
    """
    boundaries = week_boundaries(number_of_weeks, today)
    return [
        (boundaries[i + 1] + timedelta(days=1), boundaries[i])
        for i in range(number_of_weeks)
    ]
