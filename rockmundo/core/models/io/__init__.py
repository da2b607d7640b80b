"""
I/O models for API requests and responses.

Pydantic schemas defining the wire contract of the edge functions and the
JSON API, kept apart from the database entities.

Modules:
- major_events, festivals, jam_sessions, progression: edge function bodies
- skills, rehearsals, merch, bands: JSON API bodies
"""
