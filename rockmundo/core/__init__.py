"""Cross-cutting infrastructure: logging, monitoring and the database layer."""
