"""
Async repositories.

One repository per game domain. Repositories flush but never commit; the
calling service commits once per request.
"""

from .bands import BandRepository
from .base import AsyncBaseRepository, QueryBuilder
from .festivals import FestivalRepository
from .jam_sessions import JamSessionRepository
from .major_events import MajorEventRepository
from .profiles import ProfileRepository
from .rehearsals import RehearsalRepository
from .skills import SkillRepository

__all__ = [
    "AsyncBaseRepository",
    "BandRepository",
    "FestivalRepository",
    "JamSessionRepository",
    "MajorEventRepository",
    "ProfileRepository",
    "QueryBuilder",
    "RehearsalRepository",
    "SkillRepository",
]
