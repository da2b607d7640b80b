"""Server-wide configuration and constants."""
