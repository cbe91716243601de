"""
Pseudo-random todo id generation.

Ids are short strings of letters and digits. They only need to be URL-path
safe and unlikely to collide; they are not secrets, so a seeded
`random.Random` is enough.
"""
from __future__ import annotations

import random
import string
import threading
import time
from typing import Optional

ID_LENGTH = 10
# Characters must be valid in a URL path segment.
ID_ALPHABET = string.ascii_lowercase + string.ascii_uppercase + string.digits


class IdGenerator:
    """
    Thread-safe generator of fixed-length alphanumeric ids.

    Parameters
    ----------
    seed : int, optional
        Seed for the underlying PRNG. Defaults to the current time in
        nanoseconds, taken once at construction.
    length : int
        Number of characters per id.
    """

    def __init__(self, seed: Optional[int] = None, length: int = ID_LENGTH) -> None:
        self._rand = random.Random(time.time_ns() if seed is None else seed)
        self._length = length
        self._lock = threading.Lock()

    @property
    def length(self) -> int:
        return self._length

    def generate(self) -> str:
        """Return a new id. Uniqueness is the caller's concern."""
        with self._lock:
            return "".join(self._rand.choice(ID_ALPHABET) for _ in range(self._length))


# Seeded once per process; stores share it unless given their own generator.
_default_generator = IdGenerator()


def default_id_generator() -> IdGenerator:
    return _default_generator


__all__ = ["ID_ALPHABET", "ID_LENGTH", "IdGenerator", "default_id_generator"]
