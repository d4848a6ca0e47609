"""Application layer for the staffhub domain."""
