from __future__ import annotations

import logging
from typing import Any, List, Optional

import requests

from . import config as CFG
from .errors import EmptyOrInvalidSnapshot
from .index import SortedCorpusIndex
from .models import Entry

log = logging.getLogger(__name__)


def parse_snapshot(reply: Any) -> List[Entry]:
    """
    Validate a corpus reply of the form {ok: bool, words: [...]}.

    Raises EmptyOrInvalidSnapshot unless ok is true and words is a list.
    Items without a non-empty string "word" are skipped.
    """
    if not isinstance(reply, dict) or not reply.get("ok"):
        message = reply.get("message") if isinstance(reply, dict) else None
        raise EmptyOrInvalidSnapshot(message or "corpus reply is not ok")
    words = reply.get("words")
    if not isinstance(words, list):
        raise EmptyOrInvalidSnapshot("corpus reply carries no word list")

    entries: List[Entry] = []
    for item in words:
        entry = Entry.from_json(item)
        if entry is None:
            log.warning("Skipping malformed corpus item: %r", item)
            continue
        entries.append(entry)
    return entries


def fetch_snapshot(url: Optional[str] = None,
                   session: Optional[requests.Session] = None,
                   timeout: Optional[float] = CFG.LOAD_TIMEOUT) -> List[Entry]:
    """GET the full corpus and return its entries (unsorted)."""
    url = url or CFG.endpoint(CFG.CORPUS_PATH)
    http = session or requests.Session()
    log.info("Fetching corpus from %s", url)
    try:
        resp = http.get(url, headers={"Cache-Control": "no-cache"}, timeout=timeout)
        resp.raise_for_status()
        reply = resp.json()
    except requests.RequestException as exc:
        raise EmptyOrInvalidSnapshot(f"could not fetch corpus: {exc}") from exc
    except ValueError as exc:
        raise EmptyOrInvalidSnapshot("corpus reply is not JSON") from exc
    return parse_snapshot(reply)


def bootstrap(index: SortedCorpusIndex,
              url: Optional[str] = None,
              session: Optional[requests.Session] = None,
              timeout: Optional[float] = CFG.LOAD_TIMEOUT) -> bool:
    """
    Fetch the snapshot and load it into `index`.

    Returns True once the index is ready for queries. On any snapshot
    problem the index is left unloaded and False is returned.
    """
    try:
        entries = fetch_snapshot(url, session=session, timeout=timeout)
    except EmptyOrInvalidSnapshot as exc:
        index.unload()
        log.error("Corpus not loaded: %s", exc)
        return False
    index.load(entries)
    return True
