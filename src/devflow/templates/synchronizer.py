"""Idempotent, conflict-aware copy of a template tree into a workspace."""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass
from pathlib import Path

from devflow.schemas.enums import CopyStatus
from devflow.templates.filters import PathFilter, default_filter

LOGGER = logging.getLogger(__name__)

TEMPLATE_ROOT = Path(__file__).resolve().parent / "assets"
ALREADY_EXISTS_REASON = "already exists"


@dataclass(frozen=True)
class CopyOutcome:
    """Outcome for a single template file."""

    path: str
    status: CopyStatus
    reason: str | None = None


def synchronize_template(
    source_root: Path,
    destination_root: Path,
    *,
    force: bool = False,
    path_filter: PathFilter | None = None,
) -> list[CopyOutcome]:
    """Reproduce `source_root` under `destination_root`.

    Files already present are left untouched (`skipped`) unless `force` is set,
    in which case their bytes are replaced (`overwritten`). Filtered paths get
    no outcome at all. Any OSError aborts the run; nothing is rolled back.
    """
    accept = path_filter or default_filter
    outcomes: list[CopyOutcome] = []

    for source in _walk(source_root):
        rel = source.relative_to(source_root).as_posix()
        if not accept(rel):
            LOGGER.debug("Filtered template path %s", rel)
            continue

        target = destination_root / rel
        if source.is_dir():
            target.mkdir(parents=True, exist_ok=True)
            continue

        exists = target.exists()
        if exists and not force:
            outcomes.append(
                CopyOutcome(path=rel, status=CopyStatus.SKIPPED, reason=ALREADY_EXISTS_REASON)
            )
            continue

        target.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(source, target)
        outcomes.append(
            CopyOutcome(
                path=rel,
                status=CopyStatus.OVERWRITTEN if exists else CopyStatus.COPIED,
            )
        )

    return sorted(outcomes, key=lambda outcome: outcome.path)


def list_template_files(
    template_root: Path = TEMPLATE_ROOT,
    *,
    path_filter: PathFilter | None = None,
) -> list[str]:
    """List the relative file paths a synchronization would consider."""
    accept = path_filter or default_filter
    files = [
        path.relative_to(template_root).as_posix()
        for path in _walk(template_root)
        if path.is_file()
    ]
    return sorted(rel for rel in files if accept(rel))


def _walk(root: Path) -> list[Path]:
    if not root.is_dir():
        raise FileNotFoundError(f"Template root not found: {root}")
    return sorted(path for path in root.rglob("*") if path.is_dir() or path.is_file())
