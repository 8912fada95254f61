"""
Database initialization helpers.

Models are imported here so their tables get registered on Base.metadata
before ``create_all`` runs.
"""

from sqlalchemy.engine import Engine

from taskboard.db.session import engine as default_engine
from taskboard.models.base import Base
from taskboard.models import task, user  # noqa: F401


def init_db(engine: Engine | None = None) -> None:
    """
    Create all tables based on SQLAlchemy models.
    """
    Base.metadata.create_all(bind=engine or default_engine)
