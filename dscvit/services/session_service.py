# File: dscvit/services/session_service.py

"""
Session identification.

Every caller gets a stable identifier without registering: it lives in a
private `session` cookie and is minted on the first request that lacks one.
A cookie that fails to unseal (rotated key, tampering) is treated exactly
like a missing one.
"""

from typing import Optional

from loguru import logger

from dscvit.core.config import settings
from dscvit.core.cookies import PrivateCookieJar, SessionCookie
from dscvit.utils.phonetic_key import get_random_id


def get_session_id(
    jar: PrivateCookieJar,
    *,
    name: Optional[str] = None,
    domain: Optional[str] = None,
) -> str:
    """
    Return the caller's session identifier, minting one if needed.

    Only ever adds the session cookie to `jar`; an existing, readable cookie
    is returned as-is without touching the jar. Pass `domain=""` for a
    host-only cookie regardless of the configured domain.
    """
    if name is None:
        name = settings.session_cookie_name
    if domain is None:
        domain = settings.session_cookie_domain
    domain = domain or None

    session_id = jar.get_private(name)
    if session_id is not None:
        return session_id

    session_id = get_random_id()
    jar.add_private(
        SessionCookie(
            name=name,
            value=session_id,
            domain=domain,
            same_site="lax",
            secure=True,
            permanent=True,
        )
    )
    logger.info(f"Minted new session id {session_id}")
    return session_id
