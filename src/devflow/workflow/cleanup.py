"""Archive or purge step artifacts and reset the workspace records."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from devflow.clock import filesystem_timestamp
from devflow.constants import (
    HISTORY_DIR,
    QUEUE_DIR,
    QUEUE_KEEP_MARKER,
    STEPS_DIR,
    STEPS_KEEP_MARKER,
)
from devflow.errors import WorkspaceNotFoundError
from devflow.workflow.state import (
    default_preset_record,
    default_session_state,
    preset_path,
    state_path,
    write_preset_record,
    write_session_state,
)

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class FileMove:
    source: Path
    target: Path


@dataclass
class CleanupResult:
    """What a cleanup did, or would do under dry run."""

    dry_run: bool
    purge: bool
    archive_dir: Path | None = None
    archived: list[FileMove] = field(default_factory=list)
    deleted: list[Path] = field(default_factory=list)
    reset_files: list[Path] = field(default_factory=list)
    queue_removed: list[Path] = field(default_factory=list)


def list_step_files(workspace_root: Path) -> list[Path]:
    steps_dir = workspace_root / STEPS_DIR
    return sorted(
        entry
        for entry in steps_dir.iterdir()
        if entry.is_file() and entry.name != STEPS_KEEP_MARKER
    )


def list_queue_files(workspace_root: Path) -> list[Path]:
    queue_dir = workspace_root / QUEUE_DIR
    if not queue_dir.is_dir():
        return []
    return sorted(
        entry
        for entry in queue_dir.iterdir()
        if entry.is_file() and entry.name != QUEUE_KEEP_MARKER
    )


def cleanup_workspace(
    workspace_root: Path,
    *,
    purge: bool = False,
    dry_run: bool = False,
) -> CleanupResult:
    """Retire the current session.

    Step artifacts are moved to `history/<timestamp>/` (or deleted with
    `purge`), state.json and preset.json are replaced with their defaults and
    transient queue files are removed. Failures propagate and leave already
    processed files as they are. No locking is performed; running this next to
    another DevFlow command on the same workspace is the caller's concern.
    """
    steps_dir = workspace_root / STEPS_DIR
    if not steps_dir.is_dir():
        raise WorkspaceNotFoundError(
            f"{STEPS_DIR} not found under {workspace_root}; run this from a DevFlow project root."
        )

    result = CleanupResult(dry_run=dry_run, purge=purge)
    step_files = list_step_files(workspace_root)

    if purge:
        _purge_steps(step_files, result)
    elif step_files:
        result.archive_dir = workspace_root / HISTORY_DIR / filesystem_timestamp()
        _archive_steps(step_files, result.archive_dir, result)
    else:
        LOGGER.info("No step files to archive")

    result.reset_files = [state_path(workspace_root), preset_path(workspace_root)]
    if not dry_run:
        write_session_state(workspace_root, default_session_state())
        write_preset_record(preset_path(workspace_root), default_preset_record())

    result.queue_removed = list_queue_files(workspace_root)
    if not dry_run:
        for path in result.queue_removed:
            path.unlink()

    return result


def _archive_steps(step_files: list[Path], archive_dir: Path, result: CleanupResult) -> None:
    if not result.dry_run:
        archive_dir.mkdir(parents=True, exist_ok=True)
    for source in step_files:
        move = FileMove(source=source, target=archive_dir / source.name)
        if not result.dry_run:
            source.rename(move.target)
            LOGGER.debug("Archived %s -> %s", move.source, move.target)
        result.archived.append(move)


def _purge_steps(step_files: list[Path], result: CleanupResult) -> None:
    for path in step_files:
        if not result.dry_run:
            path.unlink()
            LOGGER.debug("Deleted %s", path)
        result.deleted.append(path)
