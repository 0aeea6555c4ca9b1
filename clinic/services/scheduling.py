"""
Time helpers shared by the availability and appointment engines.

These are the rules the scheduling forms apply before a request is sent:
a new slot or appointment ends one hour after it starts unless an end
time is given, and a booked slot cannot be offered for deletion.
"""
from datetime import datetime, timedelta, timezone
from typing import Optional

from ..core.config import settings


def to_utc_naive(value: Optional[datetime]) -> Optional[datetime]:
    """Normalize a timestamp for storage.

    Local-form values (``2024-03-01T09:00``) carry no offset and are kept
    as they are. Values with an offset, such as the ISO strings sent after a
    calendar drag, are converted to UTC. Either way the result is naive.
    """
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def default_end_time(start: datetime, minutes: Optional[int] = None) -> datetime:
    """End time a creation form proposes when the start time changes."""
    if minutes is None:
        minutes = settings.DEFAULT_SLOT_MINUTES
    return start + timedelta(minutes=minutes)


def can_delete_slot(slot) -> bool:
    """Only unbooked slots are offered for deletion.

    The API itself does not refuse deleting a booked slot.
    """
    return not slot.is_booked


def to_utc_iso(value: datetime) -> str:
    """Render a stored timestamp as an ISO 8601 UTC instant ending in ``Z``."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    else:
        value = value.astimezone(timezone.utc)
    return value.isoformat().replace("+00:00", "Z")
