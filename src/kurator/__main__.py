from __future__ import annotations
import argparse, logging, os, sys
from . import config as CFG
from .index import SortedCorpusIndex
from .escaping import from_clipboard
from .loader import bootstrap
from .sync import NullSync, RemoteSync
from .tags import TagStore
from .viewmodel import (AppState, commit, delete, display_description,
                        predecessor_slots, scroll, successor_slots, update)

def _supports_color() -> bool:
    return sys.stdout.isatty() and os.environ.get("NO_COLOR", "") == ""

CSI = "\033["
def _c(text: str, code: str) -> str:
    if not _supports_color(): return text
    return f"{CSI}{code}m{text}{CSI}0m"

HELP = (":add [description]  insert the current word   :del [word]  delete a word\n"
        ":scroll <delta>      move through the corpus    :tag <label> / :untag <label> / :tags\n"
        "empty line quits; anything else is the word being typed")

def render(state: AppState) -> None:
    n = state.n_around
    w = state.window
    for word in predecessor_slots(w, n):
        print(f"   {word}")
    mark = _c("=", "1;32") if w.matched else _c(">", "1;37")
    print(f" {mark} {state.word}")
    for word in successor_slots(w, n):
        print(f"   {word}")
    description = display_description(state)
    if description:
        print(_c(f"   [{description}]", "2;37"))

def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Kurator: curate a locale-sorted word list")
    p.add_argument("--host", default=CFG.API_HOST, help="Corpus service base URL")
    p.add_argument("-n", "--n-around", type=int, default=CFG.N_AROUND, help="Neighbors per side")
    p.add_argument("--tags-file", default=CFG.TAGS_FILE)
    p.add_argument("--offline", action="store_true", help="Do not mirror edits to the service")
    p.add_argument("--verbose", action="store_true")
    args = p.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.INFO)

    sync = NullSync() if args.offline else RemoteSync(args.host)
    index = SortedCorpusIndex(sync=sync)
    if not bootstrap(index, CFG.endpoint(CFG.CORPUS_PATH, args.host)):
        print(_c("error: corpus could not be loaded", "1;31"), file=sys.stderr)
        return 1

    store = TagStore(args.tags_file)
    state = AppState(index=index, n_around=args.n_around, tags=store.restore())
    print(f"{index.size:,} words loaded.  tags: {', '.join(state.tags) or '-'}")
    print(_c(HELP, "2;37"))

    try:
        while True:
            try:
                raw = input("> ")
            except (EOFError, KeyboardInterrupt):
                print(); break
            if raw == "":
                break
            cmd, _, rest = raw.partition(" ")
            if cmd == ":add":
                if commit(state, description=from_clipboard(rest) if rest else None):
                    print(_c(f"added word „{state.word}“.", "2;36"))
                else:
                    print(_c("(not added)", "2;37"))
            elif cmd == ":del":
                target = rest.strip() or state.word
                if delete(state, target):
                    print(_c(f"deleted word „{target}“.", "2;36"))
                else:
                    print(_c("(not found)", "2;37"))
            elif cmd == ":scroll":
                try:
                    scroll(state, float(rest))
                except ValueError:
                    print(_c("usage: :scroll <delta>", "2;37")); continue
            elif cmd in (":tag", ":untag"):
                label = rest.strip()
                changed = state.tags.add(label) if cmd == ":tag" else state.tags.remove(label)
                if changed:
                    store.save(state.tags)
                print(f"tags: {', '.join(state.tags) or '-'}"); continue
            elif cmd == ":tags":
                print(f"tags: {', '.join(state.tags) or '-'}"); continue
            elif cmd in (":help", ":h"):
                print(_c(HELP, "2;37")); continue
            else:
                update(state, raw)
            render(state)
    finally:
        if isinstance(sync, RemoteSync):
            sync.shutdown(wait=True)
    return 0

if __name__ == "__main__":
    sys.exit(main())
