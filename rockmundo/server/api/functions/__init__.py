"""
Edge function routes.

Serverless-style endpoints mounted under ``/functions/v1``. Every response,
success or failure, carries the permissive CORS headers the browser client
expects, and failures use an ``{"error": message}`` body.
"""
