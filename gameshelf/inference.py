"""Infer what a game directory holds from the names of its files.

Everything here is plain string/path inspection. The only I/O is the
directory listing, done through the ``list_entries`` collaborator which
defaults to :func:`gameshelf.filesystem.entries`.
"""
from __future__ import annotations
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

from .filesystem import entries, has_same_name_as_parent_dir
from .logging_config import get_logger
from .models import Game, Platform

log = get_logger("inference")

NATIVE_EXTS = ("sh", "x86", "x86_64")
COMPAT_EXTS = ("exe",)


def infer(directory: Path, *,
          list_entries: Callable[[Path], Iterable[Path]] = entries,
          same_name: Callable[[Path], bool] = has_same_name_as_parent_dir) -> Game:
    """Build a :class:`Game` for ``directory``.

    The name is the directory's basename, launchers are the direct entries
    that look startable, and the platform is set only when every launcher
    agrees on it. Genres are never inferred.
    """
    directory = Path(directory)
    platform, launchers = find_launchers(directory, list_entries=list_entries, same_name=same_name)
    game = Game(
        directory=directory,
        name=basename(directory),
        platform=platform,
        genres=(),
        launchers=tuple(launchers),
    )
    log.debug("inferred %s in %s: platform=%s launchers=%d",
              game, directory, platform.label if platform else None, len(launchers))
    return game


def find_launchers(directory: Path, *,
                   list_entries: Callable[[Path], Iterable[Path]] = entries,
                   same_name: Callable[[Path], bool] = has_same_name_as_parent_dir,
                   ) -> Tuple[Optional[Platform], List[Path]]:
    # Only the root of the directory is looked at.
    launchers = [Path(p) for p in list_entries(directory) if is_launcher(p, same_name=same_name)]
    return same_platform(launchers), launchers


def same_platform(launchers: Sequence[Path]) -> Optional[Platform]:
    """Platform shared by all launchers, or None.

    The first launcher decides the candidate; if it has no platform the
    answer is None no matter what follows. One disagreeing launcher is
    enough to give up.
    """
    if not launchers:
        return None
    first = platform(launchers[0])
    if first is None:
        return None
    if all(platform(l) == first for l in launchers):
        return first
    return None


def platform(file: Path) -> Optional[Platform]:
    if is_native(file):
        return Platform.NATIVE
    if is_compat(file):
        return Platform.COMPATIBILITY_LAYER
    return None


def is_launcher(file: Path, *,
                same_name: Callable[[Path], bool] = has_same_name_as_parent_dir) -> bool:
    # Some installers ship an executable named exactly like the install dir.
    return not is_uninstall(file) and (
        is_native(file) or is_compat(file) or same_name(Path(file))
    )


def is_uninstall(file: Path) -> bool:
    return "uninstall" in Path(file).name


def is_native(file: Path) -> bool:
    """Linux executable, going by the extension."""
    return extension_in(file, NATIVE_EXTS)


def is_compat(file: Path) -> bool:
    """Windows executable that needs Wine, going by the extension."""
    return extension_in(file, COMPAT_EXTS)


def extension(file: Path) -> Optional[str]:
    stem, dot, ext = Path(file).name.rpartition(".")
    if not dot or not stem:
        return None
    return ext


def extension_in(file: Path, extensions: Iterable[str]) -> bool:
    ext = extension(file)
    return ext is not None and ext in extensions


def basename(path: Path) -> Optional[str]:
    name = Path(path).name
    if not name or name == "..":
        return None
    try:
        name.encode("utf-8")
    except UnicodeEncodeError:
        # undecodable bytes come through os.fsdecode as lone surrogates
        return None
    return name
