from pathlib import Path

import pytest

from gameshelf import create_app


def touch(p: Path, data: str = "stub") -> Path:
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(data)
    return p


@pytest.fixture
def games_root(tmp_path):
    root = tmp_path / "Games"
    touch(root / "Celeste" / "Celeste.x86_64")
    touch(root / "Celeste" / "uninstall-Celeste.sh")
    touch(root / "Hollow Knight" / "hollow_knight.exe")
    touch(root / "Hollow Knight" / "unins000.dat")
    touch(root / "Mixed" / "start.sh")
    touch(root / "Mixed" / "game.exe")
    touch(root / "Empty" / "readme.txt")
    touch(root / "loose-file.sh")
    return root


@pytest.fixture
def app(games_root):
    app = create_app(str(games_root))
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()
