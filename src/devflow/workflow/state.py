"""Session state and preset records under `.devflow/`."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from devflow.constants import PRESET_FILE, STATE_FILE
from devflow.schemas.workflow_models import PresetRecord, SessionMetrics, SessionState
from devflow.workflow.storage import read_json, write_json

LOGGER = logging.getLogger(__name__)

DEFAULT_PRESET_PROMPT = "The devflow wizard has not run yet; run it first to match a scenario."


def default_session_state() -> SessionState:
    """Fresh state: nothing started, step 1 suggested, zero metrics."""
    return SessionState(
        active_session=None,
        current_step=None,
        completed=[],
        suggested_next="step-01.requirements",
        last_build_status=None,
        metrics=SessionMetrics(total_steps=7, passed=0, failed=0, warnings=0),
        updated_at=None,
    )


def default_preset_record() -> PresetRecord:
    return PresetRecord(guidance_prompt=DEFAULT_PRESET_PROMPT)


def state_path(workspace_root: Path) -> Path:
    return workspace_root / STATE_FILE


def preset_path(workspace_root: Path) -> Path:
    return workspace_root / PRESET_FILE


def load_session_state(workspace_root: Path) -> SessionState:
    """Read state.json, falling back to the default record when absent or invalid."""
    payload = read_json(state_path(workspace_root))
    if not isinstance(payload, dict):
        return default_session_state()
    try:
        return SessionState.model_validate(payload)
    except ValidationError as exc:
        LOGGER.warning("Invalid session state, using defaults: %s", exc)
        return default_session_state()


def write_session_state(workspace_root: Path, state: SessionState) -> Path:
    """Replace state.json wholesale; existing content is never merged."""
    return write_json(state_path(workspace_root), state.to_record())


def load_preset_record(workspace_root: Path) -> PresetRecord | None:
    payload = read_json(preset_path(workspace_root))
    if not isinstance(payload, dict):
        return None
    try:
        return PresetRecord.model_validate(payload)
    except ValidationError as exc:
        LOGGER.warning("Invalid preset record: %s", exc)
        return None


def write_preset_record(path: Path, record: PresetRecord) -> Path:
    return write_json(path, record.to_record())
