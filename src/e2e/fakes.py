# src/e2e/fakes.py
"""Minimal stand-ins for requests.Session used by the client tests."""
from __future__ import annotations

import requests


class FakeResponse:
    def __init__(self, body=None, status: int = 200, raw: str | None = None):
        self._body = body
        self.status_code = status
        self._raw = raw

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")

    def json(self):
        if self._raw is not None:
            raise ValueError(f"not JSON: {self._raw!r}")
        return self._body


class FakeSession:
    """Answers every call with the configured reply (or raises it)."""
    def __init__(self, reply):
        self.reply = reply
        self.calls: list[tuple[str, str, object]] = []

    def _answer(self):
        if isinstance(self.reply, Exception):
            raise self.reply
        return self.reply

    def get(self, url, **kwargs):
        self.calls.append(("GET", url, None))
        return self._answer()

    def post(self, url, json=None, **kwargs):
        self.calls.append(("POST", url, json))
        return self._answer()
