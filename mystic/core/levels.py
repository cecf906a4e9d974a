from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

import yaml

logger = logging.getLogger(__name__)

DEFAULT_LEVELS_DIR = Path(__file__).resolve().parent.parent / "data" / "levels"

_LEVEL_FILE = re.compile(r"^level(\d+)$")


@dataclass(frozen=True)
class Level:
    name: str
    motto: str = ""


def _read_level(path: Path) -> Level:
    raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    title = raw.get("title") if isinstance(raw, dict) else None
    if not title or not isinstance(title, str):
        raise ValueError(f"{path.name}: expected YAML with a string 'title'")
    return Level(name=title.strip(), motto=str(raw.get("motto") or "").strip())


class LevelRepository:
    """Ordered, read-only table of level names.

    ``data/levels/level<N>.yaml`` files are ordered by ``N``; a player's
    level is an index into that order.
    """

    def __init__(self, base_dir: Optional[Path] = None) -> None:
        self._base_dir = base_dir if base_dir is not None else DEFAULT_LEVELS_DIR
        self._levels = self._load_levels()

    def __len__(self) -> int:
        return len(self._levels)

    @property
    def last_index(self) -> int:
        return len(self._levels) - 1

    def at(self, index: int) -> Level:
        """Level for a progression index, clamped into the table."""
        return self._levels[max(0, min(index, self.last_index))]

    def _load_levels(self) -> List[Level]:
        if not self._base_dir.exists():
            raise FileNotFoundError(f"Levels directory not found: {self._base_dir}")

        numbered = []
        for path in self._base_dir.glob("level*.yaml"):
            m = _LEVEL_FILE.match(path.stem)
            if m:
                numbered.append((int(m.group(1)), path))
        if not numbered:
            raise ValueError(f"No level files (level<N>.yaml) found in {self._base_dir}")

        levels = [_read_level(path) for _, path in sorted(numbered)]
        logger.debug("Loaded %d levels from %s", len(levels), self._base_dir)
        return levels
