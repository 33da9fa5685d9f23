from datetime import UTC, datetime


def utc_now() -> datetime:
    """Return current UTC time as an aware datetime.

    Record timestamps are compared across stores, so they always carry tzinfo.
    """
    return datetime.now(UTC)


def to_document_timestamp(value: datetime) -> str:
    """Render a timestamp as a fixed-width ISO-8601 string.

    Microseconds are always included so that string order matches
    chronological order in every store.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.astimezone(UTC).isoformat(timespec="microseconds")
