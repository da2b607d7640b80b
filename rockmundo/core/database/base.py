"""
Base database models and utilities.

Foundation shared by every entity mapping a table of the hosted database.
Timestamp columns hold aware UTC datetimes; ``utc_now`` and ``as_utc`` are
re-exported here for the entity modules.
"""

from __future__ import annotations

import uuid

from pydantic import ConfigDict
from sqlmodel import SQLModel

from rockmundo.core.timeutils import as_utc, utc_now

__all__ = ["Base", "as_utc", "new_id", "utc_now"]


class Base(SQLModel):
    """Base class for all SQLModel entities."""

    model_config = ConfigDict(arbitrary_types_allowed=True)


def new_id() -> str:
    """Generate a UUID primary key in its canonical string form."""
    return str(uuid.uuid4())
