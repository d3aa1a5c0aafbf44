# kurator/index.py
from __future__ import annotations

import logging
from typing import Any, Iterable, Iterator, List, Optional, Sequence

from .collation import Collation, default_collation
from .errors import EmptyOrInvalidSnapshot
from .models import Entry
from .sync import NullSync, SyncNotifier

log = logging.getLogger(__name__)


class SortedCorpusIndex:
    """
    Locale-collated, client-held ordered sequence of word entries.

    Invariant: entries are ascending under Collation.compare_sort and no two
    entries are equal under Collation.compare_search. The sequence only
    changes through load(), insert() and remove(); all three keep the
    invariant.

    Until load() succeeds the index is *unloaded*: every query answers None
    and every mutation answers False. Nothing here raises for a missing
    word or an empty query.

    Mutations are optimistic: the local splice happens first, then the
    attached SyncNotifier is told about it. Whatever the notifier does later
    has no effect on this object.
    """

    def __init__(self,
                 collation: Optional[Collation] = None,
                 sync: Optional[SyncNotifier] = None) -> None:
        self.collation = collation or default_collation
        self.sync: SyncNotifier = sync or NullSync()
        self._entries: Optional[List[Entry]] = None

    # ------------- lifecycle -------------

    def load(self, entries: Any) -> int:
        """
        Replace the whole sequence with `entries`, sorted by compare_sort.

        `entries` must be a list of Entry (or snapshot dicts). Anything else
        leaves the index unloaded and raises EmptyOrInvalidSnapshot. Entries
        search-equal to one already kept are dropped, first one wins.
        """
        if not isinstance(entries, list):
            self._entries = None
            raise EmptyOrInvalidSnapshot(f"expected a list of words, got {type(entries).__name__}")

        items: List[Entry] = []
        for raw in entries:
            entry = raw if isinstance(raw, Entry) else Entry.from_json(raw)
            if entry is None or not entry.word:
                log.warning("Skipping malformed corpus item: %r", raw)
                continue
            items.append(entry)

        # stable sort keeps snapshot order among search-equal words
        items.sort(key=lambda e: self.collation.sort_key(e.word))
        kept: List[Entry] = []
        for entry in items:
            if kept and self.collation.compare_search(kept[-1].word, entry.word) == 0:
                log.warning("Dropping duplicate word %r (same as %r)", entry.word, kept[-1].word)
                continue
            kept.append(entry)

        self._entries = kept
        log.info("Corpus loaded: %d words", len(kept))
        return len(kept)

    def unload(self) -> None:
        self._entries = None

    @property
    def loaded(self) -> bool:
        return self._entries is not None

    # ------------- read access -------------

    @property
    def size(self) -> int:
        return len(self._entries) if self._entries is not None else 0

    def __len__(self) -> int:
        return self.size

    def __getitem__(self, pos: int) -> Entry:
        if self._entries is None:
            raise IndexError("index is not loaded")
        return self._entries[pos]

    def __iter__(self) -> Iterator[Entry]:
        return iter(self._entries or ())

    def entries(self, start: int = 0, stop: Optional[int] = None) -> Sequence[Entry]:
        """Copy of entries[start:stop]; empty when unloaded."""
        if self._entries is None:
            return []
        return self._entries[start:stop]

    def words(self) -> List[str]:
        return [e.word for e in self]

    def is_match(self, pos: Optional[int], word: str) -> bool:
        """True iff `pos` is a real slot holding a word search-equal to `word`."""
        if pos is None or self._entries is None or not 0 <= pos < len(self._entries):
            return False
        return self.collation.compare_search(self._entries[pos].word, word) == 0

    # ------------- search -------------

    def closest_position(self, word: str) -> Optional[int]:
        """
        Where `word` is, or where it would be inserted.

        Returns an int in [0, size], or None for an empty word or an
        unloaded index. Binary search under compare_search with an early
        exit as soon as the midpoint sits right after a smaller neighbor (or at
        the left edge) or right before a larger one (or at the right edge).
        Probes stay inside [0, size).
        """
        if not word or self._entries is None:
            return None
        words = self._entries
        cmp = self.collation.compare_search
        size = len(words)
        lo, hi = 0, size - 1
        while lo <= hi:
            pos = (lo + hi) // 2
            c = cmp(word, words[pos].word)
            if c < 0:
                if pos == 0 or cmp(word, words[pos - 1].word) > 0:
                    return pos
                hi = pos - 1
            elif c > 0:
                if pos == size - 1 or cmp(word, words[pos + 1].word) < 0:
                    return pos + 1
                lo = pos + 1
            else:
                return pos
        # only reached for an empty sequence
        return lo

    def exact_position(self, word: str) -> Optional[int]:
        """Position of a search-equal entry, or None."""
        if not word or self._entries is None:
            return None
        words = self._entries
        cmp = self.collation.compare_search
        lo, hi = 0, len(words) - 1
        while lo <= hi:
            pos = (lo + hi) // 2
            c = cmp(word, words[pos].word)
            if c < 0:
                hi = pos - 1
            elif c > 0:
                lo = pos + 1
            else:
                return pos
        return None

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.exact_position(word) is not None

    # ------------- mutation -------------

    def insert(self, word: str, description: Optional[str] = None,
               tags: Iterable[str] = ()) -> bool:
        """
        Splice a new entry at its sorted slot.

        False when the word is already present (under compare_search), the
        word is empty or the index is unloaded.
        """
        pos = self.closest_position(word)
        if pos is None or self.is_match(pos, word):
            return False
        entry = Entry(word=word, description=description, tags=list(tags))
        self._entries.insert(pos, entry)  # type: ignore[union-attr]
        log.info("Added word %r at %d", word, pos)
        self.sync.notify_add(entry)
        return True

    def remove(self, word: str) -> bool:
        """Remove the entry search-equal to `word`; False when there is none."""
        pos = self.closest_position(word)
        if not self.is_match(pos, word):
            return False
        removed = self._entries.pop(pos)  # type: ignore[union-attr,arg-type]
        log.info("Deleted word %r from %d", removed.word, pos)
        self.sync.notify_remove(removed.word)
        return True
