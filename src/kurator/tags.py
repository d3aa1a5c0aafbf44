from __future__ import annotations

import json
import logging
import os
from typing import Iterable, Iterator, List

log = logging.getLogger(__name__)


class TagSet:
    """Insertion-ordered labels attached to the next inserted word."""

    def __init__(self, labels: Iterable[str] = ()) -> None:
        self._labels: List[str] = []
        for label in labels:
            self.add(label)

    def add(self, label: str) -> bool:
        label = label.strip()
        if not label or label in self._labels:
            return False
        self._labels.append(label)
        return True

    def remove(self, label: str) -> bool:
        try:
            self._labels.remove(label)
        except ValueError:
            return False
        return True

    def clear(self) -> None:
        self._labels.clear()

    def as_list(self) -> List[str]:
        return list(self._labels)

    def __iter__(self) -> Iterator[str]:
        return iter(self._labels)

    def __len__(self) -> int:
        return len(self._labels)

    def __contains__(self, label: object) -> bool:
        return label in self._labels


class TagStore:
    """JSON file holding the tag list between editor sessions."""

    def __init__(self, path: str) -> None:
        self.path = os.path.abspath(path)

    def restore(self) -> TagSet:
        """Read the saved labels, sorted. Missing or broken file -> empty set."""
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                labels = json.load(f)
        except FileNotFoundError:
            return TagSet()
        except (OSError, ValueError) as exc:
            log.warning("Ignoring unreadable tag file %s: %s", self.path, exc)
            return TagSet()
        if not isinstance(labels, list):
            return TagSet()
        return TagSet(sorted(str(t) for t in labels))

    def save(self, tags: TagSet) -> None:
        tmp = f"{self.path}.tmp"
        os.makedirs(os.path.dirname(self.path) or ".", exist_ok=True)
        with open(tmp, "w", encoding="utf-8") as f:
            json.dump(tags.as_list(), f, ensure_ascii=False)
        os.replace(tmp, self.path)
