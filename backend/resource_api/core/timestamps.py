"""Timestamps — fixed-width, lexicographically sortable UTC ISO-8601 strings.

Invariants:
    - Format is always YYYY-MM-DDTHH:MM:SS.ffffffZ (27 chars), so string
      order equals chronological order
    - next_timestamp(previous) is strictly greater than previous

Design Decisions:
    - `now` is injectable: keeps the functions pure for tests
"""

from datetime import datetime, timedelta, timezone

_ONE_TICK = timedelta(microseconds=1)


def format_timestamp(moment: datetime) -> str:
    """Render an aware datetime as a sortable UTC string."""
    utc = moment.astimezone(timezone.utc)
    return utc.strftime("%Y-%m-%dT%H:%M:%S.%fZ")


def parse_timestamp(value: str) -> datetime:
    """Inverse of format_timestamp."""
    return datetime.strptime(value, "%Y-%m-%dT%H:%M:%S.%fZ").replace(
        tzinfo=timezone.utc,
    )


def utc_now(now: datetime | None = None) -> str:
    """Current instant as a sortable string."""
    return format_timestamp(now or datetime.now(timezone.utc))


def next_timestamp(previous: str, now: datetime | None = None) -> str:
    """Current instant, but never earlier than one tick after `previous`."""
    current = now or datetime.now(timezone.utc)
    floor = parse_timestamp(previous) + _ONE_TICK
    return format_timestamp(max(current, floor))
