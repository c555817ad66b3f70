"""Step ledger, session state and cleanup exports."""

from devflow.workflow.cleanup import CleanupResult, FileMove, cleanup_workspace
from devflow.workflow.state import (
    default_preset_record,
    default_session_state,
    load_preset_record,
    load_session_state,
    write_preset_record,
    write_session_state,
)
from devflow.workflow.steps import (
    STEP_DEFINITIONS,
    STEP_IDENTIFIERS,
    load_steps,
    partition_steps,
)

__all__ = [
    "CleanupResult",
    "FileMove",
    "STEP_DEFINITIONS",
    "STEP_IDENTIFIERS",
    "cleanup_workspace",
    "default_preset_record",
    "default_session_state",
    "load_preset_record",
    "load_session_state",
    "load_steps",
    "partition_steps",
    "write_preset_record",
    "write_session_state",
]
