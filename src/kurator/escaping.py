from __future__ import annotations
from typing import Optional

# Stored representation of a soft line break inside descriptions
SOFT_BREAK_MARKER = "&shy;"
# How the editor shows (and lets the user type) a soft break
DISPLAY_BREAK = "|"
SOFT_HYPHEN = "\xad"


def to_display(stored: Optional[str]) -> str:
    """Stored description -> editor text. None becomes ''."""
    if not stored:
        return ""
    return stored.replace(SOFT_BREAK_MARKER, DISPLAY_BREAK)


def to_stored(text: Optional[str]) -> Optional[str]:
    """
    Editor text -> stored description.

    Soft hyphens, pipes and backslashes all fold into the marker so the
    stored text never carries an ambiguous literal. '' becomes None.
    """
    if not text:
        return None
    return (text.replace(SOFT_HYPHEN, SOFT_BREAK_MARKER)
                .replace(DISPLAY_BREAK, SOFT_BREAK_MARKER)
                .replace("\\", SOFT_BREAK_MARKER))


def from_clipboard(pasted: str) -> str:
    """Pasted text keeps its soft hyphens visible as display breaks."""
    return pasted.replace(SOFT_HYPHEN, DISPLAY_BREAK)
