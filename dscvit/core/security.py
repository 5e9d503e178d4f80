# File: dscvit/core/security.py

"""
Security helpers for private cookies.

A private cookie's value is sealed as a compact JWE (`dir` key management,
A256GCM content encryption) so the client can neither read nor modify it.
The 256-bit content key is the SHA-256 digest of the configured secret;
rotating SECRET_KEY invalidates every outstanding cookie.
"""

import hashlib
from typing import Optional

from jose import jwe
from jose.constants import ALGORITHMS
from jose.exceptions import JOSEError
from loguru import logger

from dscvit.core.config import settings


def derive_cookie_key(secret_key: str) -> bytes:
    return hashlib.sha256(secret_key.encode("utf-8")).digest()


class CookieCipher:
    """
    Encrypts and authenticates cookie values with a server-side key.
    """

    def __init__(self, secret_key: str):
        self._key = derive_cookie_key(secret_key)

    def seal(self, value: str) -> str:
        token = jwe.encrypt(
            value.encode("utf-8"),
            self._key,
            algorithm=ALGORITHMS.DIR,
            encryption=ALGORITHMS.A256GCM,
        )
        return token.decode("ascii")

    def unseal(self, token: str) -> Optional[str]:
        """
        Return the plaintext of `token`, or None if it cannot be decrypted
        or fails authentication (wrong key, tampered, not a JWE at all).
        """
        try:
            plaintext = jwe.decrypt(token, self._key)
        except (JOSEError, ValueError, TypeError, KeyError) as e:
            logger.debug(f"Rejected private cookie value: {e}")
            return None
        if plaintext is None:
            return None
        try:
            return plaintext.decode("utf-8")
        except UnicodeDecodeError:
            logger.debug("Rejected private cookie value: plaintext is not UTF-8")
            return None


def get_cookie_cipher() -> CookieCipher:
    return CookieCipher(settings.secret_key)
