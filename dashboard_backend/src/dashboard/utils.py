from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional, Sequence, Union


# PUBLIC_INTERFACE
def collection_envelope(
    items: Union[Sequence[Any], Iterable[Any]],
    total: Optional[int] = None,
    **extra: Any,
) -> Dict[str, Any]:
    """
    Build a standard envelope for collection endpoints.

    Args:
        items: The list/iterable of items to return.
        total: Total number of items before any truncation; defaults to len(items).
        **extra: Additional top-level keys (e.g. the criteria or day used).

    Returns:
        Dict with keys: items, total, plus any extra keys.
    """
    # Ensure items is materialized as a list (in case an iterator is passed)
    materialized: List[Any] = list(items) if not isinstance(items, list) else items
    envelope: Dict[str, Any] = {
        "items": materialized,
        "total": int(len(materialized) if total is None else total),
    }
    envelope.update(extra)
    return envelope


def to_naive_local(value: datetime) -> datetime:
    """Convert an aware datetime to local wall-clock time; naive values pass through."""
    if value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)


# PUBLIC_INTERFACE
def reference_time(now: Optional[datetime] = None) -> datetime:
    """
    Return the reference instant as a naive local datetime.

    A missing value means the current local time; aware values are converted
    to local time so they compare with the naive task due dates.
    """
    if now is None:
        return datetime.now()
    return to_naive_local(now)
