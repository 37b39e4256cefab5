from datetime import datetime, timezone

from incident_api.db.db import db


def utcnow():
    # Stored naive, in UTC
    return datetime.now(timezone.utc).replace(tzinfo=None)


def isoformat_or_none(value):
    # Stored values are naive UTC; mark them so clients do not read local time
    return value.isoformat() + 'Z' if value else None
