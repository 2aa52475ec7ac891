from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
import os
from pathlib import Path
import tempfile


@dataclass(frozen=True)
class CacheEntry:
    path: Path

    def exists(self) -> bool:
        return self.path.exists()

    def modified_at(self) -> datetime:
        """Local-time mtime of the entry."""
        return datetime.fromtimestamp(self.path.stat().st_mtime)

    def is_fresh_on(self, day: date) -> bool:
        if not self.exists():
            return False
        return self.modified_at().date() == day

    def read_text(self) -> str:
        return self.path.read_text(encoding="utf-8")

    def write_text(self, content: str) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(content)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise


class FileCache:
    """A directory holding flat, single-file cache entries."""

    def __init__(self, base_dir: Path) -> None:
        self.base_dir = base_dir.expanduser()

    def entry(self, name: str) -> CacheEntry:
        path = self.base_dir / name
        if not name or path.parent != self.base_dir:
            raise ValueError(f"Cache entry name must be a plain file name: {name!r}")
        return CacheEntry(path)
