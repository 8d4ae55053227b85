from __future__ import annotations
from dataclasses import dataclass, field
from enum import IntEnum
from functools import total_ordering
from pathlib import Path
from typing import Optional, Tuple

NO_NAME = "a game with no name"


class Platform(IntEnum):
    NATIVE = 1
    COMPATIBILITY_LAYER = 2   # Wine and friends

    @property
    def label(self) -> str:
        return self.name.lower()


class Genre(IntEnum):
    ACTION = 1
    PLATFORMER = 2

    @property
    def label(self) -> str:
        return self.name.lower()


def _optional_key(value):
    # None sorts before any present value
    return (value is not None, value if value is not None else 0)


@total_ordering
@dataclass(frozen=True)
class Game:
    directory: Path
    name: Optional[str] = None
    platform: Optional[Platform] = None
    genres: Tuple[Genre, ...] = field(default_factory=tuple)
    launchers: Tuple[Path, ...] = field(default_factory=tuple)

    def _sort_key(self):
        return (
            (self.name is not None, self.name or ""),
            _optional_key(self.platform),
            self.directory,
            self.genres,
            self.launchers,
        )

    def __lt__(self, other):
        if not isinstance(other, Game):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __str__(self) -> str:
        return self.name if self.name is not None else NO_NAME
