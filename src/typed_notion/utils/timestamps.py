"""Conversion between Notion's ISO-8601 strings and datetime objects."""

from datetime import date, datetime, timezone


def parse_timestamp(raw: str) -> datetime:
    """Parse a Notion timestamp or date into an aware datetime.

    Date-only values (``2024-05-01``) and naive timestamps are taken as UTC.
    """
    value = datetime.fromisoformat(raw)
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value


def format_timestamp(value: datetime | date) -> str:
    """Format a datetime the way Notion (and ``Date.toISOString``) prints it.

    ``datetime`` values become ``2024-04-29T00:00:00.000Z``; naive ones are
    taken as UTC. Plain ``date`` values become ``2024-04-29``.
    """
    if not isinstance(value, datetime):
        return value.isoformat()
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    utc = value.astimezone(timezone.utc)
    return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"
