# src/e2e/test_editor_cli.py
import pytest

import kurator.__main__ as cli
from kurator.models import Entry

NAMES = ["Anton", "Berta", "Cäsar", "Dora", "Emil"]


@pytest.fixture
def run(monkeypatch, tmp_path, capsys):
    def fake_bootstrap(index, url, **kwargs):
        entries = [Entry(w) for w in NAMES]
        entries[3].description = "Vorname&shy;weiblich"
        index.load(entries)
        return True

    monkeypatch.setattr(cli, "bootstrap", fake_bootstrap)

    def _run(*lines):
        feed = iter(lines)
        monkeypatch.setattr("builtins.input", lambda prompt="": next(feed))
        code = cli.main(["--offline", "-n", "2", "--tags-file", str(tmp_path / "tags.json")])
        return code, capsys.readouterr().out
    return _run


def test_typing_a_known_word_renders_its_description(run):
    code, out = run("Dora", "")
    assert code == 0
    assert " = Dora" in out
    assert "[Vorname|weiblich]" in out


def test_add_turns_pasted_soft_hyphens_into_display_breaks(run):
    code, out = run("Carl", ":add Vorname\u00admännlich", "Carl", "")
    assert code == 0
    assert "added word „Carl“." in out
    assert "[Vorname|männlich]" in out
    assert "\u00ad" not in out


def test_failed_load_exits_nonzero(monkeypatch, tmp_path):
    monkeypatch.setattr(cli, "bootstrap", lambda index, url, **kw: False)
    assert cli.main(["--offline", "--tags-file", str(tmp_path / "tags.json")]) == 1
