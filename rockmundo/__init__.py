"""Rockmundo game backend.

Server-side pieces of a browser music-career simulation game: the reward and
progression calculators, and the privileged serverless functions that write
their results back to the hosted Postgres database.

Core subpackages
----------------

- ``rockmundo.game``: pure calculators (skills, major events, festivals, jam
  sessions, rehearsals, merch designer geometry, band overview charts).
- ``rockmundo.core``: logging, monitoring and the database layer (SQLModel
  entities mirroring the remote tables, async repositories).
- ``rockmundo.server``: the FastAPI application hosting the edge functions
  under ``/functions/v1`` and the JSON API under ``/api/v1``.
"""

__version__ = "0.1.0"
