from __future__ import annotations
import os

# API host of the remote corpus service (no trailing slash)
API_HOST: str = os.environ.get("KURATOR_API_HOST", "http://127.0.0.1:18081").rstrip("/")

CORPUS_PATH: str = "/corpus"
WORD_ADD_PATH: str = "/word/add"
WORD_DELETE_PATH: str = "/word/delete"

# Number of neighbors shown on each side of the cursor word (3 or 5 in use)
N_AROUND: int = int(os.environ.get("KURATOR_N_AROUND", "3"))

# Wheel/scroll delta units per index step
SCROLL_SENSITIVITY: int = 2

# Collation locale; only German phonebook tailoring is built in
LOCALE: str = "de"

# Seconds to wait for the initial corpus snapshot (None = no limit)
LOAD_TIMEOUT: float | None = 30.0

# /* ~~~ one worker keeps add/delete calls in issue order ~~~ */
SYNC_WORKERS: int = 1

# Where the terminal editor keeps the tag list between runs
TAGS_FILE: str = os.environ.get(
    "KURATOR_TAGS_FILE",
    os.path.join(os.path.expanduser("~"), ".kurator_tags.json"),
)


def endpoint(path: str, host: str | None = None) -> str:
    """Join a route onto the API host."""
    return f"{(host or API_HOST).rstrip('/')}{path}"
