"""Application layer: command handlers orchestrating the auth ports."""

from staffhub_auth.application.verification import verify_password

__all__ = ["verify_password"]
