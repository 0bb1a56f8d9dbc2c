from datetime import datetime, timezone


def isoformat_utc(value: datetime | None) -> str | None:
    """
    Render *value* as ``YYYY-MM-DDTHH:MM:SS.mmmZ``.

    SQLite hands back naive datetimes; those are taken to already be UTC.
    """
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    else:
        value = value.astimezone(timezone.utc)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")
