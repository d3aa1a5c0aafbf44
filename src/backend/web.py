from __future__ import annotations
import argparse
import logging
from flask import Flask, request, jsonify
from werkzeug.exceptions import HTTPException
from . import config as CFG
from .DB.api import WordStore, make_store
from .errors import InvalidBodyError, StoreError
from .models import Word

log = logging.getLogger(__name__)

app = Flask(__name__)
_store: WordStore | None = None


def _get_store() -> WordStore:
    if _store is None:
        raise RuntimeError("Word store not initialized. Call main() or set web._store first.")
    return _store


def _body() -> dict:
    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        raise InvalidBodyError("request body must be a JSON object")
    word = body.get("word")
    if not isinstance(word, str) or not word:
        raise InvalidBodyError("field 'word' must be a non-empty string")
    return body


def _status(ok: bool = True, message: str | None = None):
    return jsonify({"ok": ok, "message": message})


# ---------- API ----------
@app.get("/")
def root():
    return "API root."


@app.get("/corpus")
def corpus():
    words = _get_store().get_corpus()
    log.info("get_corpus(): %d words", len(words))
    return jsonify({"ok": True, "message": None, "words": [w.to_json() for w in words]})


@app.post("/word/add")
def add_word():
    body = _body()
    description = body.get("description")
    tags = body.get("tags") or []
    if description is not None and not isinstance(description, str):
        raise InvalidBodyError("field 'description' must be a string or null")
    if not isinstance(tags, list) or not all(isinstance(t, str) for t in tags):
        raise InvalidBodyError("field 'tags' must be a list of strings")
    _get_store().add_word(Word(word=body["word"], description=description, tags=tags))
    log.info("add_word(); word = »%s«", body["word"])
    return _status()


@app.post("/word/delete")
def delete_word():
    word = _body()["word"]
    deleted = _get_store().delete_word(word)
    log.info("delete_word(); word = »%s« deleted_count: %d", word, deleted)
    return _status()


# ---------- errors / CORS ----------
def _error(code: int, status: str, message: str):
    resp = jsonify({"ok": False, "code": code, "status": status, "message": message})
    resp.status_code = code
    return resp


@app.errorhandler(StoreError)
def handle_store_error(e: StoreError):
    return _error(400, "400 Bad Request", str(e))


@app.errorhandler(HTTPException)
def handle_http_error(e: HTTPException):
    return _error(e.code or 500, f"{e.code} {e.name}", e.name)


@app.after_request
def allow_any_origin(resp):
    resp.headers["Access-Control-Allow-Origin"] = "*"
    resp.headers["Access-Control-Allow-Headers"] = "Content-Type"
    resp.headers["Access-Control-Allow-Methods"] = "GET, POST, OPTIONS"
    return resp


def _read_seed(path: str) -> list[Word]:
    with open(path, "r", encoding="utf-8") as f:
        return [Word(word=ln.strip()) for ln in f if ln.strip()]


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Kurator corpus service")
    ap.add_argument("--db", dest="db", default=CFG.DB_DSN)  # DSN: "sqlite:///path" or "memory://"
    ap.add_argument("--seed", default=None, help="Text file, one word per line, loaded into an empty store")
    ap.add_argument("--listen", default=CFG.LISTEN, help="host:port")
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING)
    host, _, port = args.listen.rpartition(":")
    if not host or not port.isdigit():
        ap.error(f"cannot parse listen address {args.listen!r}")

    global _store
    _store = make_store(args.db, seed=_read_seed(args.seed) if args.seed else None)
    log.info("Listening on http://%s", args.listen)
    try:
        app.run(host=host, port=int(port), debug=args.verbose)
    finally:
        _store.close()
        _store = None
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
