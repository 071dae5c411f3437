"""Infrastructure adapters (database, external rate APIs)."""
