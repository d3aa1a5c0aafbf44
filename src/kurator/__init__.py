"""
Kurator Word Index Module

This module keeps a locale-sorted word list on the client so an editor can
type a word and immediately see where it sits alphabetically, whether it
already exists, and insert or delete it at its exact sorted position.

The module is designed with a clean separation of concerns:
- Collation (German phonebook order, sort and search strengths)
- The sorted corpus index (closest/exact search, ordered insert/remove)
- The context window view-model (neighbors around the typed word)
- Remote sync (fire-and-forget mirroring of edits to the corpus service)
- Bootstrap (fetching the initial snapshot)

Example Usage:
    from kurator import SortedCorpusIndex, RemoteSync, AppState, bootstrap, update

    index = SortedCorpusIndex(sync=RemoteSync("http://127.0.0.1:18081"))
    if bootstrap(index):
        state = AppState(index=index, n_around=3)
        window = update(state, "Dora")
        print([e.word for e in window.predecessors], window.matched)
"""

# src/kurator/__init__.py
from .collation import Collation, compare_search, compare_sort
from .errors import EmptyOrInvalidSnapshot, KuratorError, RemoteSyncFailure
from .index import SortedCorpusIndex
from .loader import bootstrap, fetch_snapshot
from .models import ContextWindow, Entry
from .sync import NullSync, RemoteSync, SyncNotifier
from .viewmodel import AppState, commit, compute_window, delete, scroll, update

__version__ = "1.0.0"
__all__ = [
    "Collation", "compare_sort", "compare_search",
    "KuratorError", "EmptyOrInvalidSnapshot", "RemoteSyncFailure",
    "SortedCorpusIndex", "Entry", "ContextWindow",
    "SyncNotifier", "RemoteSync", "NullSync",
    "bootstrap", "fetch_snapshot",
    "AppState", "compute_window", "update", "scroll", "commit", "delete",
]
