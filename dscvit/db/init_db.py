# File: dscvit/db/init_db.py

"""
Database initialization helpers.

Models are imported so their tables get registered on Base.metadata.
"""

from typing import Optional

from sqlalchemy.engine import Engine

from dscvit.db.session import engine as default_engine
from dscvit.models.base import Base
from dscvit.models import paste, user  # noqa: F401


def init_db(engine: Optional[Engine] = None) -> None:
    """
    Create the users and pastes tables if they do not exist yet.
    """
    Base.metadata.create_all(bind=engine or default_engine)
