"""Path filter applied while synchronizing a template tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import PurePosixPath
from typing import Callable, Iterable

from pathspec import PathSpec

PathFilter = Callable[[str], bool]

BOOKKEEPING_SEGMENTS = {
    "node_modules",
    ".git",
    "__pycache__",
}


@dataclass
class TemplateFilter:
    """Accepts a relative path unless it walks through a bookkeeping directory
    or matches one of the configured exclude patterns."""

    exclude_spec: PathSpec = field(default_factory=lambda: PathSpec.from_lines("gitignore", []))

    @classmethod
    def from_globs(cls, exclude_globs: Iterable[str]) -> "TemplateFilter":
        return cls(exclude_spec=PathSpec.from_lines("gitignore", list(exclude_globs)))

    def __call__(self, relative_path: str) -> bool:
        rel = PurePosixPath(relative_path)
        if any(part in BOOKKEEPING_SEGMENTS for part in rel.parts):
            return False
        if self.exclude_spec.match_file(rel.as_posix()):
            return False
        return True


default_filter = TemplateFilter()
