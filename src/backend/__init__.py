"""Reference corpus service for the word curator (Flask + pluggable word store)."""
from __future__ import annotations
from .DB.api import WordStore, make_store
from .errors import DuplicateWordError, StoreError, WordNotFoundError
from .models import Word

__all__ = ["WordStore", "make_store", "Word", "StoreError", "WordNotFoundError", "DuplicateWordError"]
