"""Infrastructure adapters for the record store."""
