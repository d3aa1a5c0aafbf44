# backend/DB/api.py
from __future__ import annotations
import os
from typing import Iterable, List, Optional, Protocol

from ..models import Word


class WordStore(Protocol):
    # Create
    def add_word(self, w: Word) -> None: ...
    def bulk_add(self, items: Iterable[Word]) -> int: ...
    # Read
    def get_word(self, word: str) -> Word: ...
    def get_corpus(self) -> List[Word]: ...
    def count(self) -> int: ...
    # Delete
    def delete_word(self, word: str) -> int: ...
    # lifecycle
    def close(self) -> None: ...


def make_store(dsn: str, *, seed: Optional[Iterable[Word]] = None) -> WordStore:
    """
    Factory:
      - sqlite:///path -> SQLiteStore (file and table are created when missing)
      - memory://      -> MemoryStore
    `seed` words are added to an empty store only.
    """
    if dsn.startswith("sqlite:///"):
        from .sqlite_store import SQLiteStore
        path = dsn.removeprefix("sqlite:///")
        os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)
        store: WordStore = SQLiteStore(path)
    elif dsn.startswith("memory://"):
        from .memory_store import MemoryStore
        store = MemoryStore()
    else:
        raise ValueError(f"Unsupported store DSN: {dsn}")

    if seed is not None and store.count() == 0:
        store.bulk_add(seed)
    return store
