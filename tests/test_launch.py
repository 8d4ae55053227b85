import threading
from pathlib import Path

import pytest

import gameshelf.launch as L
from gameshelf.inference import infer


class _Recorder:
    def __init__(self):
        self.calls = []

    def __call__(self, *a, **kw):
        self.calls.append((a, kw))
        return object()


@pytest.fixture
def popen(monkeypatch):
    rec = _Recorder()
    monkeypatch.setattr(L.subprocess, "Popen", rec)
    return rec


def test_launch_command():
    assert L.launch_command(Path("/g/run.sh")) == ["sh", "/g/run.sh"]
    assert L.launch_command(Path("/g/game.x86_64")) == ["/g/game.x86_64"]
    assert L.launch_command(Path("/g/game")) == ["/g/game"]
    assert L.launch_command(Path("/g/game.exe")) == ["wine", "/g/game.exe"]
    assert L.launch_command(Path("/g/game.exe"), "env WINEPREFIX=/p wine64") == [
        "env", "WINEPREFIX=/p", "wine64", "/g/game.exe"]


def test_run_game_first_launcher(games_root, popen):
    game = infer(games_root / "Hollow Knight")
    ok, msg = L.run_game(game, wine_command="wine")
    assert ok, msg
    (argv,), kw = popen.calls[0]
    assert argv == ["wine", str(games_root / "Hollow Knight" / "hollow_knight.exe")]
    assert kw["cwd"] == str(games_root / "Hollow Knight")


def test_run_game_chosen_launcher(games_root, popen):
    game = infer(games_root / "Mixed")
    ok, _ = L.run_game(game, Path("start.sh"))
    assert ok
    assert popen.calls[0][0][0] == ["sh", str(games_root / "Mixed" / "start.sh")]


def test_run_game_rejects_foreign_launcher(games_root, popen):
    game = infer(games_root / "Mixed")
    ok, msg = L.run_game(game, Path("../Celeste/Celeste.x86_64"))
    assert not ok
    assert "not a launcher" in msg
    assert popen.calls == []


def test_run_game_without_launchers(games_root, popen):
    ok, msg = L.run_game(infer(games_root / "Empty"))
    assert not ok
    assert msg == "No launcher found for Empty."
    assert popen.calls == []


def test_run_game_spawn_failure(games_root, monkeypatch):
    def boom(*a, **kw):
        raise FileNotFoundError("wine: not found")
    monkeypatch.setattr(L.subprocess, "Popen", boom)
    ok, msg = L.run_game(infer(games_root / "Hollow Knight"))
    assert not ok
    assert "wine" in msg


def test_run_game_reaps_child(games_root, monkeypatch):
    reaped = threading.Event()

    class _Child:
        def __init__(self, argv, cwd=None):
            self.argv = argv

        def wait(self):
            reaped.set()
            return 0

    monkeypatch.setattr(L.subprocess, "Popen", _Child)
    ok, _ = L.run_game(infer(games_root / "Celeste"))
    assert ok
    assert reaped.wait(timeout=5)
