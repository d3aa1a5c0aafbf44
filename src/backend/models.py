from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, List, Optional

@dataclass
class Word:
    word: str
    description: Optional[str] = None
    tags: List[str] = field(default_factory=list)

    def to_json(self) -> dict[str, Any]:
        return {"word": self.word, "description": self.description, "tags": list(self.tags)}
