# gameshelf/launch.py
from __future__ import annotations

import shlex
import subprocess
import threading
from pathlib import Path
from typing import List, Optional, Tuple

from .inference import platform
from .logging_config import get_logger
from .models import Game, Platform

log = get_logger("launch")

def launch_command(launcher: Path, wine_command: str = "wine") -> List[str]:
    """argv that starts ``launcher``: Wine for Windows binaries, sh for scripts."""
    kind = platform(launcher)
    target = str(launcher)
    if kind is Platform.COMPATIBILITY_LAYER:
        return shlex.split(wine_command) + [target]
    if kind is Platform.NATIVE and launcher.suffix == ".sh":
        return ["sh", target]
    return [target]

def _pick_launcher(game: Game, launcher: Optional[Path]) -> Optional[Path]:
    if launcher is None:
        return game.launchers[0] if game.launchers else None
    launcher = Path(launcher)
    if not launcher.is_absolute():
        launcher = game.directory / launcher
    return launcher if launcher in game.launchers else None

def run_game(game: Game, launcher: Optional[Path] = None,
             wine_command: str = "wine") -> Tuple[bool, str]:
    """Spawn one of the game's launchers (the first one by default) and return at once."""
    if not game.launchers:
        return False, f"No launcher found for {game}."
    chosen = _pick_launcher(game, launcher)
    if chosen is None:
        return False, f"{launcher} is not a launcher of {game}."

    argv = launch_command(chosen.absolute(), wine_command)
    log.info("launching %s: %s", game, " ".join(shlex.quote(a) for a in argv))
    try:
        p = subprocess.Popen(argv, cwd=str(game.directory))
    except OSError as e:
        log.error("failed to launch %s: %s", game, e)
        return False, str(e)

    # reap the child when it exits
    if hasattr(p, "wait"):
        def _wait():
            code = p.wait()
            log.info("%s exited with %s", game, code)

        threading.Thread(target=_wait, daemon=True).start()

    return True, "Launched."
