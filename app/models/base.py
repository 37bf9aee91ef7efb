from datetime import datetime, timezone

from sqlalchemy import DateTime


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


# column type for created_at fields; values are always timezone-aware
TimestampType = DateTime(timezone=True)
