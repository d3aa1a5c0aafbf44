# src/e2e/test_loader.py
import pytest
import requests

from fakes import FakeResponse, FakeSession
from kurator.errors import EmptyOrInvalidSnapshot
from kurator.index import SortedCorpusIndex
from kurator.loader import bootstrap, fetch_snapshot, parse_snapshot

URL = "http://corpus.test/corpus"
SNAPSHOT = {
    "ok": True,
    "message": None,
    "words": [
        {"word": "Emil", "description": None, "tags": None},
        {"word": "Ärger", "description": "Verdruss", "tags": ["Gefühl"]},
        {"word": "Dora"},
        {"description": "no word"},
    ],
}


def test_parse_snapshot_skips_items_without_word():
    entries = parse_snapshot(SNAPSHOT)
    assert [e.word for e in entries] == ["Emil", "Ärger", "Dora"]
    assert entries[0].tags == []
    assert entries[1].tags == ["Gefühl"]


@pytest.mark.parametrize("reply", [
    {"ok": False, "words": []},
    {"ok": True, "words": None},
    {"ok": True, "words": {"word": "Dora"}},
    {"ok": True},
    [],
    None,
])
def test_parse_snapshot_rejects_unusable_replies(reply):
    with pytest.raises(EmptyOrInvalidSnapshot):
        parse_snapshot(reply)


def test_fetch_snapshot_uses_get():
    session = FakeSession(FakeResponse(SNAPSHOT))
    entries = fetch_snapshot(URL, session=session)
    assert len(entries) == 3
    assert session.calls == [("GET", URL, None)]


@pytest.mark.parametrize("reply", [
    requests.ConnectionError("down"),
    FakeResponse({"ok": True, "words": []}, status=500),
    FakeResponse(raw="not json"),
])
def test_fetch_snapshot_transport_problems(reply):
    with pytest.raises(EmptyOrInvalidSnapshot):
        fetch_snapshot(URL, session=FakeSession(reply))


def test_bootstrap_loads_sorted_index():
    idx = SortedCorpusIndex()
    assert bootstrap(idx, URL, session=FakeSession(FakeResponse(SNAPSHOT))) is True
    assert idx.words() == ["Ärger", "Dora", "Emil"]


def test_bootstrap_failure_leaves_index_unloaded():
    idx = SortedCorpusIndex()
    idx.load([])
    assert bootstrap(idx, URL, session=FakeSession(FakeResponse({"ok": False}))) is False
    assert not idx.loaded
    assert idx.closest_position("Dora") is None
