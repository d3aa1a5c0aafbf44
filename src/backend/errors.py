from __future__ import annotations


class StoreError(Exception):
    """Base for errors the service reports as 400 Bad Request."""


class WordNotFoundError(StoreError):
    def __init__(self, word: str) -> None:
        super().__init__(f"word not found: {word!r}")
        self.word = word


class DuplicateWordError(StoreError):
    def __init__(self, word: str) -> None:
        super().__init__(f"word already exists: {word!r}")
        self.word = word


class InvalidBodyError(StoreError):
    """Request body is not the JSON object the route expects."""
