"""Flat directory listing and parent-name matching used by inference."""
from __future__ import annotations
from pathlib import Path
from typing import List

from .logging_config import get_logger

log = get_logger("filesystem")


def entries(directory: Path) -> List[Path]:
    """Direct children of ``directory`` sorted by name; never recurses.

    Missing, non-directory and unreadable paths give an empty listing.
    """
    try:
        children = list(Path(directory).iterdir())
    except (FileNotFoundError, NotADirectoryError, PermissionError) as e:
        log.debug("cannot list %s: %s", directory, e)
        return []
    return sorted(children, key=lambda p: p.name)


def has_same_name_as_parent_dir(file: Path) -> bool:
    file = Path(file)
    parent = file.parent
    if not parent.name:
        parent = file.absolute().parent
    return bool(file.name) and file.name == parent.name
