"""Shared pytest fixtures for all test domains."""
