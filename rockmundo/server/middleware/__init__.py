"""
Middleware modules for the game server.

Request logging and timing shared by the edge functions and the JSON API.
"""

from .logfire_middleware import LogfireMiddleware

__all__ = ["LogfireMiddleware"]
