import base64
from pathlib import Path, PurePosixPath
from typing import Dict, List, Optional

from .filesystem import entries
from .ignore import is_ignored, load_ignore_rules
from .inference import infer
from .logging_config import get_logger
from .models import Game, Platform

log = get_logger("scanning")

UNKNOWN_PLATFORM = "unknown"
PLATFORM_LABELS = {p.label: p for p in Platform}

def game_id_for(rel: str) -> str:
    """URL-safe id for a game folder relative to the games root, without padding."""
    return base64.urlsafe_b64encode(rel.encode("utf-8")).decode("ascii").rstrip("=")

def rel_for_id(gid: str) -> str:
    pad = "=" * (-len(gid) % 4)
    try:
        return base64.urlsafe_b64decode(gid + pad).decode("utf-8")
    except ValueError as e:
        raise ValueError(f"malformed game id: {gid!r}") from e

def build_games(games_root: Path, ignore_file: str = ".gameshelfignore") -> List[Game]:
    """One inferred game per direct subdirectory of ``games_root``.

    Folders are kept as found under ``games_root``; symlinked game folders
    are not resolved, so their ids stay relative to the root.
    """
    games: List[Game] = []
    if not games_root.is_dir():
        log.info("games root %s does not exist", games_root)
        return games

    rules = load_ignore_rules(games_root, ignore_file)

    for p in entries(games_root):
        if not p.is_dir():
            continue
        if is_ignored(games_root, p, rules):
            log.debug("skipping ignored directory %s", p)
            continue
        games.append(infer(p))
    return games

def _game_rel(gid: str) -> Optional[str]:
    try:
        rel = PurePosixPath(rel_for_id(gid))
    except ValueError:
        return None
    # a single plain folder name directly under the root
    if rel.is_absolute() or len(rel.parts) != 1 or rel.parts[0] == ".." or "\x00" in rel.name:
        return None
    return rel.name

def get_game_or_404(games_root: Path, gid: str) -> Game:
    from flask import abort
    rel = _game_rel(gid)
    if rel is None:
        abort(404)
    folder = Path(games_root) / rel
    if not folder.is_dir():
        abort(404)
    return infer(folder)

def filter_games(games: List[Game], platform: Optional[str] = None,
                 query: Optional[str] = None) -> List[Game]:
    if platform:
        label = platform.strip().lower()
        if label != UNKNOWN_PLATFORM and label not in PLATFORM_LABELS:
            raise ValueError(f"unknown platform: {platform}")
        wanted = PLATFORM_LABELS.get(label)
        games = [g for g in games if g.platform == wanted]
    if query:
        q = query.lower()
        games = [g for g in games if g.name is not None and q in g.name.lower()]
    return games

def game_as_dict(game: Game, games_root: Path) -> Dict:
    try:
        rel = game.directory.relative_to(games_root).as_posix()
    except ValueError:
        rel = None
    return {
        "id": game_id_for(rel) if rel and rel != "." else None,
        "name": game.name,
        "title": str(game),
        "platform": game.platform.label if game.platform else None,
        "directory": str(game.directory),
        "genres": [g.label for g in game.genres],
        "launchers": [_launcher_rel(game, l) for l in game.launchers],
    }

def _launcher_rel(game: Game, launcher: Path) -> str:
    try:
        return launcher.relative_to(game.directory).as_posix()
    except ValueError:
        return launcher.as_posix()
