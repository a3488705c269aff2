"""Note domain model."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone


def utc_timestamp() -> str:
    """Return the current UTC time as an ISO-8601 string."""
    return datetime.now(timezone.utc).isoformat(timespec="seconds")


@dataclass(slots=True)
class Note:
    """A persisted free-text note."""

    id: str
    title: str
    content: str = ""
    created_at: str = ""
    updated_at: str = ""
