# File: dscvit/api/deps.py

from collections.abc import Generator

from fastapi import Depends, Request, Response
from sqlalchemy.orm import Session

from dscvit.core.cookies import PrivateCookieJar
from dscvit.core.security import CookieCipher, get_cookie_cipher
from dscvit.db.session import SessionLocal
from dscvit.services.session_service import get_session_id


def get_db() -> Generator[Session, None, None]:
    """
    FastAPI dependency that provides a SQLAlchemy session.

    The session is closed after the response; routes commit their own writes.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_cookie_jar(
    request: Request,
    response: Response,
    cipher: CookieCipher = Depends(get_cookie_cipher),
) -> PrivateCookieJar:
    return PrivateCookieJar(request.cookies, response, cipher)


def get_current_session_id(jar: PrivateCookieJar = Depends(get_cookie_jar)) -> str:
    """
    Usage in route functions:
        session_id: str = Depends(get_current_session_id)
    """
    return get_session_id(jar)
