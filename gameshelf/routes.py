from __future__ import annotations
from pathlib import Path
from flask import Blueprint, current_app, render_template_string, redirect, url_for, flash, request, abort, jsonify

from .settings import load_settings
from .scanning import PLATFORM_LABELS, UNKNOWN_PLATFORM, build_games, filter_games, game_as_dict, get_game_or_404
from .launch import run_game
from .templates import INDEX_HTML

bp = Blueprint("gameshelf", __name__)

def _cfg():
    c = current_app.config
    return (
        Path(c["GAMES_ROOT"]),
        c["APP_TITLE"],
        Path(c["SETTINGS_FILE"]),
        c["IGNORE_FILE"],
    )

def _filtered_games(root: Path, ignore_file: str):
    games = build_games(root, ignore_file)
    try:
        return filter_games(games, request.args.get("platform"), request.args.get("q"))
    except ValueError as e:
        abort(400, description=str(e))

@bp.get("/")
def index():
    G, APP_TITLE, _, IGNORE_FILE = _cfg()
    games = _filtered_games(G, IGNORE_FILE)
    return render_template_string(
        INDEX_HTML,
        app_title=APP_TITLE,
        root=G,
        games=[game_as_dict(g, G) for g in games],
        query=request.args.get("q", ""),
        platform=request.args.get("platform", ""),
        platform_labels=[*PLATFORM_LABELS, UNKNOWN_PLATFORM],
    )

@bp.get("/api/games")
def api_games():
    G, _, _, IGNORE_FILE = _cfg()
    games = _filtered_games(G, IGNORE_FILE)
    return jsonify([game_as_dict(g, G) for g in games])

@bp.get("/api/games/<game_id>")
def api_game(game_id):
    G, *_ = _cfg()
    return jsonify(game_as_dict(get_game_or_404(G, game_id), G))

@bp.post("/launch/<game_id>")
def launch(game_id):
    G, _, SETTINGS_FILE, _ = _cfg()
    game = get_game_or_404(G, game_id)
    settings = load_settings(SETTINGS_FILE)

    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        payload = {}
    launcher = request.form.get("launcher") or payload.get("launcher") or None
    if launcher is not None and not isinstance(launcher, str):
        abort(400, description="launcher must be a path string")
    ok, msg = run_game(game, Path(launcher) if launcher else None, settings["wine_command"])

    if request.accept_mimetypes.accept_json and not request.accept_mimetypes.accept_html:
        return (jsonify({"ok": ok, ("message" if ok else "error"): msg}), 200 if ok else 500)

    flash(("Launch requested. " if ok else "Launch failed: ") + msg)
    return redirect(url_for("gameshelf.index"))

@bp.get("/favicon.ico")
def favicon():
    return ("", 204)
