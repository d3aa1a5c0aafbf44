# backend/DB/memory_store.py
from __future__ import annotations
from typing import Dict, Iterable, List
from .api import WordStore
from ..errors import DuplicateWordError, WordNotFoundError
from ..models import Word

class MemoryStore(WordStore):
    """Simple in-memory word store (useful for tests or ephemeral runs)."""
    def __init__(self) -> None:
        self._rows: Dict[str, Word] = {}

    # C
    def add_word(self, w: Word) -> None:
        if w.word in self._rows:
            raise DuplicateWordError(w.word)
        self._rows[w.word] = w

    def bulk_add(self, items: Iterable[Word]) -> int:
        n = 0
        for w in items:
            if w.word not in self._rows:
                self._rows[w.word] = w; n += 1
        return n

    # R
    def get_word(self, word: str) -> Word:
        try:
            return self._rows[word]
        except KeyError:
            raise WordNotFoundError(word)

    def get_corpus(self) -> List[Word]:
        return list(self._rows.values())

    def count(self) -> int:
        return len(self._rows)

    # D
    def delete_word(self, word: str) -> int:
        return 1 if self._rows.pop(word, None) is not None else 0

    def close(self) -> None:
        self._rows.clear()
