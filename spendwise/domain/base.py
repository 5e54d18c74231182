from datetime import UTC, datetime


def utc_now() -> datetime:
    """Naive UTC timestamp, matching the naive DateTime columns"""
    return datetime.now(UTC).replace(tzinfo=None)
