"""
Request-scoped services.

Each service wraps one database session and commits at most once per call,
so every row an edge function touches is written together or not at all.
"""
