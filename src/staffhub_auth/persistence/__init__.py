"""Persistence implementations for staffhub_auth.

This package contains database-specific implementations of the
repository interfaces defined in staffhub_auth.repositories.

Usage:
    from staffhub_auth.persistence.sqlalchemy import (
        CredentialsRepositorySQLAlchemy,
        CredentialsModel,
    )
"""
