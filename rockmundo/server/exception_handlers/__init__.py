"""
Exception handlers for the game server.

Custom exception handlers for game rule errors, request validation errors
and unhandled exceptions, plus a setup function registering them with the
FastAPI application.
"""

from .global_handler import setup_exception_handlers

__all__ = ["setup_exception_handlers"]
