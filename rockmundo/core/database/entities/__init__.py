"""
Database entity models.

Entities mirror the subset of hosted tables the server touches, grouped by
game domain:

- bands: bands and their earnings ledger
- profiles: player profiles, XP wallet, attributes, daily grants, XP ledger
- skills: skill definitions and per-profile progress
- major_events: events, yearly instances, band performances, song ratings
- festivals: festival slots, performance history, reviews, merch sales
- jam_sessions: sessions, participants, outcomes, gifted song log
- songs: songs (gifted demos)
- inbox: inbox notifications
- rehearsals: rehearsal rooms, band bookings and per-song familiarity
"""

from . import (
    bands,
    festivals,
    inbox,
    jam_sessions,
    major_events,
    profiles,
    rehearsals,
    skills,
    songs,
)

__all__ = [
    "bands",
    "festivals",
    "inbox",
    "jam_sessions",
    "major_events",
    "profiles",
    "rehearsals",
    "skills",
    "songs",
]
