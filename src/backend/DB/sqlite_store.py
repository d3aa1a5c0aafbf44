# backend/DB/sqlite_store.py
from __future__ import annotations
import json
import sqlite3
import threading
from typing import Iterable, List
from .api import WordStore
from ..errors import DuplicateWordError, WordNotFoundError
from ..models import Word

_SCHEMA = """
CREATE TABLE IF NOT EXISTS words (
  word TEXT PRIMARY KEY,
  description TEXT,
  tags TEXT NOT NULL DEFAULT '[]'
);
"""

def _row_to_word(row) -> Word:
    word, description, tags = row
    return Word(word=word, description=description, tags=json.loads(tags or "[]"))

class SQLiteStore(WordStore):
    """Word store in a single SQLite table; safe to share across request threads."""
    def __init__(self, db_path: str) -> None:
        self.db_path = db_path
        self.conn = sqlite3.connect(db_path, check_same_thread=False)
        self._lock = threading.Lock()
        self.conn.executescript(_SCHEMA)

    # ---- Create ----
    def add_word(self, w: Word) -> None:
        with self._lock:
            try:
                self.conn.execute(
                    "INSERT INTO words(word, description, tags) VALUES (?,?,?)",
                    (w.word, w.description, json.dumps(w.tags, ensure_ascii=False)),
                )
            except sqlite3.IntegrityError:
                raise DuplicateWordError(w.word)
            self.conn.commit()

    def bulk_add(self, items: Iterable[Word]) -> int:
        rows = [(w.word, w.description, json.dumps(w.tags, ensure_ascii=False)) for w in items]
        with self._lock:
            cur = self.conn.executemany(
                "INSERT OR IGNORE INTO words(word, description, tags) VALUES (?,?,?)",
                rows,
            )
            self.conn.commit()
        return cur.rowcount

    # ---- Read ----
    def get_word(self, word: str) -> Word:
        with self._lock:
            row = self.conn.execute(
                "SELECT word, description, tags FROM words WHERE word=?", (word,)
            ).fetchone()
        if row is None:
            raise WordNotFoundError(word)
        return _row_to_word(row)

    def get_corpus(self) -> List[Word]:
        with self._lock:
            rows = self.conn.execute("SELECT word, description, tags FROM words").fetchall()
        return [_row_to_word(r) for r in rows]

    def count(self) -> int:
        with self._lock:
            return self.conn.execute("SELECT COUNT(*) FROM words").fetchone()[0]

    # ---- Delete ----
    def delete_word(self, word: str) -> int:
        with self._lock:
            cur = self.conn.execute("DELETE FROM words WHERE word=?", (word,))
            self.conn.commit()
        return cur.rowcount

    # ---- lifecycle ----
    def close(self) -> None:
        self.conn.close()
