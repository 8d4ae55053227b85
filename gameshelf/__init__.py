import os
from flask import Flask

from .logging_config import setup_logging
from .routes import bp as routes_bp

# Bind only localhost unless overridden
BIND = os.environ.get("BIND", "127.0.0.1")
PORT = int(os.environ.get("PORT", "5000"))
DEBUG = os.environ.get("GAMESHELF_DEBUG", "").lower() in ("1", "true", "yes", "on")

def ensure_root(games_root: str) -> None:
    if not os.path.isdir(games_root):
        raise SystemExit(f"GAMES_ROOT does not exist: {games_root}")

def create_app(games_root: str) -> Flask:
    app = Flask(__name__)
    app.secret_key = os.environ.get("FLASK_SECRET", "dev-" + os.urandom(8).hex())
    app.config["GAMES_ROOT"] = games_root
    app.config["APP_TITLE"] = "Game Shelf"
    app.config["SETTINGS_FILE"] = os.path.join(games_root, "_gameshelf.json")
    app.config["IGNORE_FILE"] = ".gameshelfignore"

    app.register_blueprint(routes_bp)
    return app
