# kurator/viewmodel.py
"""
Context window view-model.

Everything the editor shows is derived from an AppState by the functions in
this module: the neighborhood of the typed word, whether it already exists,
and the description of the matched entry. The functions never render; the
*_slots() helpers only lay out words into fixed-width slots for whoever does.

Pipeline per keystroke:
    update(state, word)
        -> index.closest_position(word)
        -> compute_window(...)   (slice N neighbors each side)
        -> state.window / state.current_idx / state.description

Scroll, commit and delete all end in update(), so there is one code path
from "cursor word changed" to "window shown".
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import List, Optional

from . import config as CFG
from .escaping import to_display, to_stored
from .index import SortedCorpusIndex
from .models import EMPTY_WINDOW, ContextWindow
from .tags import TagSet

log = logging.getLogger(__name__)


@dataclass
class AppState:
    """All mutable editor state, owned in one place."""
    index: SortedCorpusIndex
    n_around: int = CFG.N_AROUND
    word: str = ""
    current_idx: Optional[int] = None
    window: ContextWindow = EMPTY_WINDOW
    description: str = ""          # display form (soft breaks shown as "|")
    tags: TagSet = field(default_factory=TagSet)


def compute_window(index: SortedCorpusIndex, word: str, n: int) -> ContextWindow:
    """Neighborhood of `word`: up to n entries on each side."""
    pos = index.closest_position(word)
    if not word or pos is None:
        return EMPTY_WINDOW
    matched = index.is_match(pos, word)
    start = pos + 1 if matched else pos
    return ContextWindow(
        predecessors=tuple(index.entries(max(0, pos - n), pos)),
        successors=tuple(index.entries(start, min(index.size, start + n))),
        matched=matched,
        position=pos,
    )


def update(state: AppState, word: str) -> ContextWindow:
    """Re-derive the whole view for a new cursor word."""
    window = compute_window(state.index, word, state.n_around)
    state.word = word
    state.window = window
    state.current_idx = window.position
    if window.matched:
        state.description = to_display(state.index[window.position].description)  # type: ignore[index]
    else:
        state.description = ""
    return window


def scroll(state: AppState, delta: float, sensitivity: float = CFG.SCROLL_SENSITIVITY) -> Optional[str]:
    """
    Move the cursor by a relative wheel delta and show the word found there.

    Returns the new cursor word, or None when there is nothing to scroll.
    """
    size = state.index.size
    if size == 0 or state.current_idx is None:
        return None
    step = math.floor(delta / sensitivity + 0.5)
    idx = min(max(state.current_idx + step, 0), size - 1)
    word = state.index[idx].word
    update(state, word)
    return word


def commit(state: AppState, word: Optional[str] = None, description: Optional[str] = None) -> bool:
    """
    Insert the cursor word with the current description and tags.

    `description` is display text; it is escaped before it reaches the
    index. False when the word is empty or already present.
    """
    word = state.word if word is None else word
    text = state.description if description is None else description
    if not word:
        return False
    added = state.index.insert(word, to_stored(text), state.tags.as_list())
    if added:
        update(state, word)
    return added


def delete(state: AppState, word: str) -> bool:
    """
    Delete `word` (the cursor word or one of its neighbors).

    When the cursor word itself goes away the cursor moves to the first
    successor, or else to the last predecessor.
    """
    index = state.index
    if not word or index.exact_position(word) is None:
        return False
    if not index.remove(word):
        return False
    cursor = state.word
    if cursor and index.collation.compare_search(cursor, word) == 0:
        window = state.window
        if window.successors:
            cursor = window.successors[0].word
        elif window.predecessors:
            cursor = window.predecessors[-1].word
        else:
            cursor = ""
    update(state, cursor)
    return True


def display_description(state: AppState) -> str:
    """Description of the matched entry in display form; '' when unmatched."""
    return state.description


def predecessor_slots(window: ContextWindow, n: int) -> List[str]:
    """Right-aligned: blanks lead, the nearest neighbor is last."""
    words = [e.word for e in window.predecessors][-n:] if n > 0 else []
    return [""] * (n - len(words)) + words


def successor_slots(window: ContextWindow, n: int) -> List[str]:
    """Left-aligned: the nearest neighbor is first, blanks trail."""
    words = [e.word for e in window.successors][:n] if n > 0 else []
    return words + [""] * (n - len(words))
