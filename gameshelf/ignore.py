"""Rules from the ``.gameshelfignore`` file at the top of the games root.

One rule per line, ``#`` starts a comment. ``Name/`` and ``Name`` hide that
game folder, shell globs (``Demo*``) are matched against the folder name and
a leading ``!`` brings back a folder hidden by an earlier rule. The last rule
that matches decides.
"""
from __future__ import annotations
import fnmatch
from dataclasses import dataclass
from pathlib import Path
from typing import List


@dataclass(frozen=True)
class IgnoreRule:
    pattern: str
    negated: bool = False

    @classmethod
    def parse(cls, line: str) -> "IgnoreRule":
        negated = line.startswith("!")
        pattern = (line[1:] if negated else line).replace("\\", "/").strip("/")
        return cls(pattern=pattern, negated=negated)

    def matches(self, rel: str) -> bool:
        return (rel == self.pattern
                or rel.startswith(self.pattern + "/")
                or fnmatch.fnmatchcase(rel, self.pattern))


def load_ignore_rules(root: Path, ignore_filename: str) -> List[IgnoreRule]:
    p = root / ignore_filename
    if not p.is_file():
        return []
    rules = []
    for line in p.read_text(encoding="utf-8", errors="ignore").splitlines():
        s = line.strip()
        if s and not s.startswith("#"):
            rules.append(IgnoreRule.parse(s))
    return rules


def is_ignored(root: Path, game_dir: Path, rules: List[IgnoreRule]) -> bool:
    rel = game_dir.relative_to(root).as_posix()
    hidden = False
    for rule in rules:
        if rule.matches(rel):
            hidden = not rule.negated
    return hidden
