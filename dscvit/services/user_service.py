# File: dscvit/services/user_service.py

"""
User record reconciliation.

All functions take a live SQLAlchemy session supplied by the caller and run
inside the caller's transaction; nothing here opens, commits or closes it.
Storage errors propagate unchanged. The only condition turned into a
success is a primary-key conflict on create.
"""

from sqlalchemy import select, update
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.orm import Session
from loguru import logger

from dscvit.models.user import User
from dscvit.schemas.user import UserCreate, UserUpdate

_DIALECT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class UserNotFoundError(LookupError):
    def __init__(self, user_id: str):
        super().__init__(f"User {user_id!r} not found")
        self.user_id = user_id


def _insert_or_ignore(db: Session, values: dict):
    dialect = db.get_bind().dialect.name
    try:
        insert = _DIALECT_INSERTS[dialect]
    except KeyError:
        raise ValueError(f"Insert-or-ignore is not supported on {dialect!r}") from None
    return (
        insert(User.__table__)
        .values(**values)
        .on_conflict_do_nothing(index_elements=["id"])
    )


def create_user(db: Session, user: UserCreate) -> int:
    """
    Insert `user` unless a row with the same id exists.

    Returns the number of rows inserted: 1 for a new user, 0 if the id was
    already taken (the existing row is left untouched). Only PostgreSQL and
    SQLite sessions are supported; any other dialect raises ValueError.
    """
    result = db.execute(_insert_or_ignore(db, user.model_dump()))
    count = result.rowcount
    if count:
        logger.info(f"Created user {user.id}")
    else:
        logger.debug(f"User {user.id} already exists, insert ignored")
    return count


def find_user(db: Session, user_id: str) -> User:
    stmt = (
        select(User)
        .where(User.id == user_id)
        .execution_options(populate_existing=True)
    )
    user = db.execute(stmt).scalar_one_or_none()
    if user is None:
        raise UserNotFoundError(user_id)
    return user


def update_user(db: Session, user: UserUpdate) -> User:
    """
    Overwrite username, password and activated of an existing user.

    Fields not set on `user` are written as NULL. Raises UserNotFoundError
    instead of creating the row.
    """
    users = User.__table__
    stmt = (
        update(users)
        .where(users.c.id == user.id)
        .values(
            username=user.username,
            password=user.password,
            activated=user.activated,
        )
    )
    result = db.execute(stmt)
    if result.rowcount == 0:
        raise UserNotFoundError(user.id)
    logger.info(f"Updated user {user.id}")
    return find_user(db, user.id)
