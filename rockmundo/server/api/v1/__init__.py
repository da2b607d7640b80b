"""JSON API routes mounted under ``/api/v1`` (plus the root health checks)."""
