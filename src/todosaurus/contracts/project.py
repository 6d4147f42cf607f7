"""Project scope shared by per-project components."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Project:
    root: Path

    @property
    def name(self) -> str:
        return self.root.name

    def relative_path(self, path: Path) -> str:
        """Return *path* relative to the project root in POSIX form.

        Paths outside the project are returned as given.
        """
        resolved = path.resolve()
        try:
            return resolved.relative_to(self.root.resolve()).as_posix()
        except ValueError:
            return resolved.as_posix()
