"""FastAPI application hosting the edge functions and the JSON API."""
