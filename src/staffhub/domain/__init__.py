"""Domain layer for the StaffHub service."""
