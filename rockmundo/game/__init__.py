"""
Game rules.

Pure calculation functions with no database or network access. Services in
``rockmundo.server.services`` load rows, call these rules and persist the
results. Functions that involve chance take a ``random.Random``.
"""
