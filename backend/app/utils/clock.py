"""Timestamp helpers for audit columns."""

from datetime import datetime, timezone


def utcnow() -> datetime:
    """Naive UTC now; audit columns store no offset."""
    return datetime.now(timezone.utc).replace(tzinfo=None)
