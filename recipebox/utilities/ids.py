"""Id generators handed to repositories and the shopping list builder.

Ids follow the ``<prefix>_<timestamp>_<suffix>`` shape. Nothing should rely on
that shape beyond uniqueness within a store.
"""
import itertools
import random
import string
import time
from typing import Callable

IdFactory = Callable[[str], str]

_ALPHABET = string.ascii_lowercase + string.digits


def generate_id(prefix: str) -> str:
    '''Returns e.g. "recipe_1718030400123_k3j9x0a".'''
    timestamp = int(time.time() * 1000)
    suffix = "".join(random.choices(_ALPHABET, k=7))
    return f"{prefix}_{timestamp}_{suffix}"


class CounterIdFactory:
    """Deterministic ids: ``<prefix>_1``, ``<prefix>_2``... (one counter shared by all prefixes)."""

    def __init__(self, start: int = 1):
        self._counter = itertools.count(start)

    def __call__(self, prefix: str) -> str:
        return f"{prefix}_{next(self._counter)}"


__all__ = ["IdFactory", "generate_id", "CounterIdFactory"]
