"""Fixed step definitions and presence tracking of step artifacts."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from pydantic import ValidationError

from devflow.schemas.enums import StepKind
from devflow.schemas.workflow_models import StepDefinition, StepRecord, StepStatus
from devflow.workflow.storage import read_json

LOGGER = logging.getLogger(__name__)

STEP_DEFINITIONS: tuple[StepDefinition, ...] = (
    StepDefinition(slot=1, kind=StepKind.REQUIREMENTS, title="Requirements"),
    StepDefinition(slot=2, kind=StepKind.API_CONTRACT, title="API contract"),
    StepDefinition(slot=3, kind=StepKind.PLAN, title="Development plan"),
    StepDefinition(slot=4, kind=StepKind.TODOS, title="Task list"),
    StepDefinition(slot=5, kind=StepKind.IMPL, title="Implementation"),
    StepDefinition(slot=6, kind=StepKind.BUILD_CHECK, title="Build check"),
    StepDefinition(slot=7, kind=StepKind.SUMMARY, title="Summary"),
)
STEP_IDENTIFIERS = frozenset(definition.identifier for definition in STEP_DEFINITIONS)


def step_path(workspace_root: Path, definition: StepDefinition) -> Path:
    return workspace_root / definition.relative_path


def load_step(workspace_root: Path, definition: StepDefinition) -> StepStatus:
    """Inspect one step artifact.

    Presence is decided by the filesystem alone; a record that fails to parse
    still counts as present, just without summary/status.
    """
    path = step_path(workspace_root, definition)
    if not path.is_file():
        return StepStatus(definition=definition, path=str(path), exists=False)

    record = _parse_record(path)
    return StepStatus(
        definition=definition,
        path=str(path),
        exists=True,
        summary=record.summary,
        status=record.status,
    )


def load_steps(workspace_root: Path) -> list[StepStatus]:
    """Load all seven slots, always returned in slot order."""
    with ThreadPoolExecutor(max_workers=len(STEP_DEFINITIONS)) as executor:
        return list(
            executor.map(lambda definition: load_step(workspace_root, definition), STEP_DEFINITIONS)
        )


def partition_steps(steps: list[StepStatus]) -> tuple[list[StepStatus], list[StepStatus]]:
    """Split into (completed, missing), both keeping slot order."""
    completed = [step for step in steps if step.exists]
    missing = [step for step in steps if not step.exists]
    return completed, missing


def _parse_record(path: Path) -> StepRecord:
    payload = read_json(path)
    if not isinstance(payload, dict):
        return StepRecord()
    try:
        return StepRecord.model_validate(payload)
    except ValidationError as exc:
        LOGGER.warning("Step record %s has invalid summary/status: %s", path, exc)
        return StepRecord()
