#!/usr/bin/env python3
import os
import sys
from gameshelf import create_app, ensure_root, setup_logging, BIND, PORT, DEBUG

def _resolve_games_root() -> str:
    if len(sys.argv) >= 2:
        return os.path.abspath(sys.argv[1])
    return os.path.abspath(os.environ.get("GAMES_ROOT", os.path.expanduser("~/Games")))

if __name__ == "__main__":
    setup_logging(debug=DEBUG)
    games_root = _resolve_games_root()
    ensure_root(games_root)
    app = create_app(games_root)
    app.run(host=BIND, port=PORT, debug=False)
