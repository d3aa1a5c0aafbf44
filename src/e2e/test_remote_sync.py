# src/e2e/test_remote_sync.py
import logging
import threading

import pytest
import requests

from fakes import FakeResponse, FakeSession
from kurator.errors import RemoteSyncFailure
from kurator.index import SortedCorpusIndex
from kurator.models import Entry
from kurator.sync import NullSync, RemoteSync

HOST = "http://corpus.test"


def _sync(reply) -> tuple[RemoteSync, FakeSession]:
    session = FakeSession(reply)
    return RemoteSync(HOST, session=session), session


def test_add_posts_word_description_and_tags():
    sync, session = _sync(FakeResponse({"ok": True, "message": None}))
    fut = sync.notify_add(Entry("Dora", "Vorname", ["Name"]))
    assert fut.result(timeout=5) == {"ok": True, "message": None}
    sync.shutdown()
    assert session.calls == [
        ("POST", f"{HOST}/word/add", {"word": "Dora", "description": "Vorname", "tags": ["Name"]}),
    ]


def test_remove_posts_word_only():
    sync, session = _sync(FakeResponse({"ok": True}))
    sync.notify_remove("Dora").result(timeout=5)
    sync.shutdown()
    assert session.calls == [("POST", f"{HOST}/word/delete", {"word": "Dora"})]


@pytest.mark.parametrize("reply", [
    FakeResponse({"ok": False, "message": "word already exists"}),
    FakeResponse({"ok": False}, status=400),
    FakeResponse(status=200, raw="<html>"),
    requests.ConnectionError("refused"),
])
def test_failures_surface_as_remote_sync_failure(reply, caplog):
    sync, _ = _sync(reply)
    with caplog.at_level(logging.ERROR, logger="kurator.sync"):
        fut = sync.notify_add(Entry("Dora"))
        exc = fut.exception(timeout=5)
        sync.shutdown(wait=True)
    assert isinstance(exc, RemoteSyncFailure)
    assert exc.action == "add" and exc.word == "Dora"
    assert "Remote sync failure" in caplog.text


def test_unexpected_session_error_is_wrapped():
    sync, _ = _sync(RuntimeError("boom"))
    exc = sync.notify_remove("Dora").exception(timeout=5)
    sync.shutdown(wait=True)
    assert isinstance(exc, RemoteSyncFailure)
    assert exc.action == "delete"
    assert "RuntimeError" in str(exc) and "boom" in str(exc)


def test_failed_sync_never_rolls_back_local_index():
    sync, _ = _sync(requests.ConnectionError("refused"))
    idx = SortedCorpusIndex(sync=sync)
    idx.load([Entry("Anton"), Entry("Emil")])
    assert idx.insert("Dora") is True
    assert idx.remove("Anton") is True
    sync.shutdown(wait=True)
    assert idx.words() == ["Dora", "Emil"]


def test_null_sync_accepts_everything():
    idx = SortedCorpusIndex(sync=NullSync())
    idx.load([])
    assert idx.insert("Dora")
    assert idx.remove("Dora")


class GatedSession:
    """Holds every POST until the test opens the gate."""
    def __init__(self):
        self.gate = threading.Event()
        self.started = threading.Event()

    def post(self, url, json=None, **kwargs):
        self.started.set()
        self.gate.wait(timeout=5)
        return FakeResponse({"ok": True})


def test_local_insert_is_visible_while_remote_call_is_pending():
    session = GatedSession()
    sync = RemoteSync(HOST, session=session)
    idx = SortedCorpusIndex(sync=sync)
    idx.load([Entry("Anton")])
    try:
        assert idx.insert("Dora") is True
        assert idx.words() == ["Anton", "Dora"]
        assert session.started.wait(timeout=5)
        assert not session.gate.is_set()
    finally:
        session.gate.set()
        sync.shutdown(wait=True)
    assert idx.words() == ["Anton", "Dora"]
