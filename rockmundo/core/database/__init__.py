"""
Database layer for the game backend.

The schema is owned by the hosted database; this package only maps the
tables the server reads and writes.

Structure:
- entities/: SQLModel entities grouped by game domain
- repositories/: async data access grouped by game domain
- session.py: Global engine and session factory management
- utils.py: Engine, session factory and test schema helpers
"""

from .base import Base
from .session import (
    async_session_maker,
    check_connection,
    engine,
    get_session,
)
from .utils import (
    create_all,
    create_engine,
    create_sessionmaker,
)

__all__ = [
    "Base",
    "async_session_maker",
    "check_connection",
    "create_all",
    "create_engine",
    "create_sessionmaker",
    "engine",
    "get_session",
]
