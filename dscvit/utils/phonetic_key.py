# File: dscvit/utils/phonetic_key.py

"""
Pronounceable random identifiers.

Keys alternate consonants and vowels ("kibosuvexa") so they are easy to read
aloud and type back in. The same key doubles as session token and user
primary key; uniqueness is only as strong as the random space, collisions are
resolved by the users table's insert-or-ignore policy.
"""

import secrets
from typing import Optional

from dscvit.core.config import settings

CONSONANTS = "bcdfghjklmnpqrstvwxyz"
VOWELS = "aeiou"


def get_random_id(length: Optional[int] = None) -> str:
    if length is None:
        length = settings.session_id_length
    if length <= 0:
        raise ValueError(f"Identifier length must be positive, got {length}")

    use_vowel = secrets.randbelow(2) == 0
    chars = []
    for _ in range(length):
        pool = VOWELS if use_vowel else CONSONANTS
        chars.append(secrets.choice(pool))
        use_vowel = not use_vowel
    return "".join(chars)
