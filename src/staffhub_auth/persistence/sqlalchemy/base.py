"""SQLAlchemy declarative base for staffhub_auth models.

Uses the same metadata as staffhub's Base so credentials can reference
the users table and all tables are created together.
"""

from staffhub.infrastructure.persistence.sqlalchemy.models.base import Base

AuthBase = Base
