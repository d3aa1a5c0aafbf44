from __future__ import annotations
import unicodedata
from functools import lru_cache
from typing import Callable, Tuple

from .config import LOCALE

# German phonebook tailoring: umlauts expand to base letter + "e"
_PHONEBOOK = str.maketrans({"ä": "ae", "ö": "oe", "ü": "ue", "ß": "ss"})

_KEY_CACHE_SIZE = 1 << 16

SORT = "sort"
SEARCH = "search"


def _sign(a, b) -> int:
    return (a > b) - (a < b)


class Collation:
    """
    Locale-aware word comparison in two strengths.

    * search: base letters only. Case and accents are ignored and the
      phonebook expansions apply, so "Ärger", "aerger" and "AERGER" are equal.
    * sort:   the search key refined by an accent-bearing casefold and finally
      by the raw word. This is a strict total order, and whenever the search
      comparison says < or > the sort comparison says the same.
    """

    def __init__(self, locale: str = LOCALE, phonebook: bool = True) -> None:
        if not locale.lower().startswith("de"):
            phonebook = False
        self.locale = locale
        self.phonebook = phonebook
        self.search_key: Callable[[str], str] = lru_cache(maxsize=_KEY_CACHE_SIZE)(self._primary)
        self.sort_key: Callable[[str], Tuple[str, str, str]] = lru_cache(maxsize=_KEY_CACHE_SIZE)(self._full)

    def _primary(self, word: str) -> str:
        s = unicodedata.normalize("NFC", word).casefold()
        if self.phonebook:
            s = s.translate(_PHONEBOOK)
        s = unicodedata.normalize("NFKD", s)
        return "".join(ch for ch in s if not unicodedata.combining(ch))

    def _full(self, word: str) -> Tuple[str, str, str]:
        accented = unicodedata.normalize("NFD", word.casefold())
        return (self.search_key(word), accented, word)

    def compare_sort(self, a: str, b: str) -> int:
        return _sign(self.sort_key(a), self.sort_key(b))

    def compare_search(self, a: str, b: str) -> int:
        return _sign(self.search_key(a), self.search_key(b))

    def comparator(self, mode: str = SEARCH) -> Callable[[str, str], int]:
        """Return the compare function for `mode` ("sort" or "search")."""
        if mode == SORT:
            return self.compare_sort
        if mode == SEARCH:
            return self.compare_search
        raise ValueError(f"unknown collation mode: {mode!r}")


default_collation = Collation()

compare_sort = default_collation.compare_sort
compare_search = default_collation.compare_search
