"""Infrastructure adapters for the staffhub domain."""
