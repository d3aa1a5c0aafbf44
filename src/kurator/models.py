# src/kurator/models.py
"""
Data models for the word curator.

This module defines two small, focused data containers:

- Entry: one word of the corpus with its optional description and tags.
- ContextWindow: the neighborhood shown around the word being typed.

These classes do not contain business logic; ordering, searching and
mutation live in kurator.index and kurator.viewmodel.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple


@dataclass(slots=True)
class Entry:
    """
    One word of the corpus.

    Attributes
    ----------
    word : str
        The key. Non-empty and unique under the search collation once the
        entry is owned by a SortedCorpusIndex. Never renamed in place.
    description : Optional[str]
        Free text in *stored* form, i.e. soft breaks are encoded with the
        marker from kurator.escaping. None when the word has no description.
    tags : List[str]
        Labels attached when the word was inserted.
    """
    word: str
    description: Optional[str] = None
    tags: List[str] = field(default_factory=list)

    def to_json(self) -> dict[str, Any]:
        """Wire form used by the add endpoint."""
        return {"word": self.word, "description": self.description, "tags": list(self.tags)}

    @classmethod
    def from_json(cls, item: Any) -> Optional["Entry"]:
        """
        Build an Entry from one element of the corpus snapshot.

        Returns None when the element has no usable word; the caller decides
        whether that is worth a warning.
        """
        if not isinstance(item, dict):
            return None
        word = item.get("word")
        if not isinstance(word, str) or not word:
            return None
        description = item.get("description")
        if not isinstance(description, str):
            description = None
        tags = item.get("tags")
        if not isinstance(tags, list):
            tags = []
        return cls(word=word, description=description, tags=[str(t) for t in tags])


@dataclass(frozen=True, slots=True)
class ContextWindow:
    """
    The alphabetic neighborhood of the cursor word.

    Derived and ephemeral: recomputed from scratch on every change of the
    cursor word, never patched.

    Attributes
    ----------
    predecessors : Tuple[Entry, ...]
        Up to N entries before the cursor, oldest first.
    successors : Tuple[Entry, ...]
        Up to N entries after the cursor (after the matched entry when
        matched is True).
    matched : bool
        True iff the cursor word already exists in the index.
    position : Optional[int]
        The closest position the window was derived from, or None when no
        position applies (empty word, unloaded index).
    """
    predecessors: Tuple[Entry, ...] = ()
    successors: Tuple[Entry, ...] = ()
    matched: bool = False
    position: Optional[int] = None

    @property
    def empty(self) -> bool:
        return not self.predecessors and not self.successors and not self.matched


EMPTY_WINDOW = ContextWindow()
