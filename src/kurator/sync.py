# kurator/sync.py
from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Optional, Protocol

import requests

from . import config as CFG
from .errors import RemoteSyncFailure
from .models import Entry

log = logging.getLogger(__name__)


class SyncNotifier(Protocol):
    """The only view the index has of the remote store."""
    def notify_add(self, entry: Entry) -> Any: ...
    def notify_remove(self, word: str) -> Any: ...


class NullSync:
    """Offline notifier: accepts every mutation and tells nobody."""
    def notify_add(self, entry: Entry) -> None:
        return None

    def notify_remove(self, word: str) -> None:
        return None


class RemoteSync:
    """
    Fire-and-forget mirror of local mutations to the corpus service.

    Each call is attempted once on a background worker and returns a Future
    immediately. A failure (transport error, HTTP error status, a body
    with ok=false, or anything else the session raises) is logged and set
    on the future as RemoteSyncFailure; the local index keeps its state
    either way. No retry, no queueing beyond the executor, no timeout.
    """

    def __init__(self,
                 host: Optional[str] = None,
                 *,
                 session: Optional[requests.Session] = None,
                 workers: int = CFG.SYNC_WORKERS) -> None:
        self.add_url = CFG.endpoint(CFG.WORD_ADD_PATH, host)
        self.delete_url = CFG.endpoint(CFG.WORD_DELETE_PATH, host)
        self._session = session or requests.Session()
        self._pool = ThreadPoolExecutor(max_workers=max(1, int(workers)),
                                        thread_name_prefix="kurator-sync")

    # /* ~~~ narrow interface used by SortedCorpusIndex ~~~ */
    def notify_add(self, entry: Entry) -> Future:
        return self._submit("add", entry.word, self.add_url, entry.to_json())

    def notify_remove(self, word: str) -> Future:
        return self._submit("delete", word, self.delete_url, {"word": word})

    def shutdown(self, wait: bool = True) -> None:
        """Stop accepting calls; with wait=True let in-flight ones finish."""
        self._pool.shutdown(wait=wait)
        log.info("Remote sync shut down")

    # ------------- internals -------------

    def _submit(self, action: str, word: str, url: str, payload: dict) -> Future:
        fut = self._pool.submit(self._post, action, word, url, payload)
        fut.add_done_callback(self._report)
        return fut

    def _post(self, action: str, word: str, url: str, payload: dict) -> dict:
        try:
            resp = self._session.post(url, json=payload)
            resp.raise_for_status()
            body = resp.json()
        except requests.RequestException as exc:
            raise RemoteSyncFailure(action, word, str(exc)) from exc
        except ValueError as exc:  # body is not JSON
            raise RemoteSyncFailure(action, word, "response is not JSON") from exc
        except Exception as exc:
            raise RemoteSyncFailure(action, word, f"{type(exc).__name__}: {exc}") from exc
        if not isinstance(body, dict) or not body.get("ok"):
            message = body.get("message") if isinstance(body, dict) else None
            raise RemoteSyncFailure(action, word, message or "remote answered ok=false")
        return body

    @staticmethod
    def _report(fut: Future) -> None:
        if fut.cancelled():
            return
        exc = fut.exception()
        if exc is None:
            log.debug("Remote sync ok: %s", fut.result())
        else:
            log.error("Remote sync failure: %s", exc)
