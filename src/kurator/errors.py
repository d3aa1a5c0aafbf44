from __future__ import annotations


class KuratorError(Exception):
    """Base class for all client-side errors."""


class EmptyOrInvalidSnapshot(KuratorError):
    """The corpus endpoint did not deliver a usable word list."""


class RemoteSyncFailure(KuratorError):
    """An add/delete call to the remote store failed or answered ok=false.

    The local index is never rolled back when this happens.
    """

    def __init__(self, action: str, word: str, reason: str) -> None:
        super().__init__(f"{action} of {word!r} failed: {reason}")
        self.action = action
        self.word = word
        self.reason = reason
