import os

# Address the corpus service listens on ("host:port")
LISTEN: str = os.environ.get("KURATOR_LISTEN", "127.0.0.1:18081")

# Word store DSN: "memory://" or "sqlite:///path/to/words.sqlite"
DB_DSN: str = os.environ.get("KURATOR_DB", "memory://")
