# File: dscvit/core/cookies.py

"""
Private cookie jar for a single request/response exchange.

Reads come from the incoming request's cookies, writes go out as
`Set-Cookie` headers on the response. Values are sealed with a
`CookieCipher`, so a read only succeeds for cookies this server wrote.
"""

from dataclasses import dataclass
from typing import Dict, Mapping, Optional

from starlette.responses import Response

from dscvit.core.security import CookieCipher

# A "permanent" cookie: 20 years, the browser keeps it until cleared.
PERMANENT_MAX_AGE = 20 * 365 * 24 * 60 * 60


@dataclass
class SessionCookie:
    name: str
    value: str
    domain: Optional[str] = None
    path: str = "/"
    same_site: str = "lax"
    secure: bool = True
    http_only: bool = True
    permanent: bool = True


class PrivateCookieJar:
    def __init__(
        self,
        cookies: Mapping[str, str],
        response: Response,
        cipher: CookieCipher,
    ):
        self._incoming = cookies
        self._response = response
        self._cipher = cipher
        self._added: Dict[str, str] = {}

    def get_private(self, name: str) -> Optional[str]:
        """
        Value of the private cookie `name`, or None if it is missing or
        cannot be unsealed. Cookies added during this exchange win.
        """
        if name in self._added:
            return self._added[name]
        raw = self._incoming.get(name)
        if raw is None:
            return None
        return self._cipher.unseal(raw)

    def add_private(self, cookie: SessionCookie) -> None:
        self._response.set_cookie(
            key=cookie.name,
            value=self._cipher.seal(cookie.value),
            max_age=PERMANENT_MAX_AGE if cookie.permanent else None,
            path=cookie.path,
            domain=cookie.domain,
            secure=cookie.secure,
            httponly=cookie.http_only,
            samesite=cookie.same_site,
        )
        self._added[cookie.name] = cookie.value

    @property
    def added(self) -> Dict[str, str]:
        """Plaintext values of the cookies added during this exchange."""
        return dict(self._added)
