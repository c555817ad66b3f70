"""Review aggregation: step ledger plus collaborator signals into suggestions."""

from __future__ import annotations

import logging
from pathlib import Path

from devflow.clock import isoformat_utc, utc_now
from devflow.constants import BUILD_OK_STATUS
from devflow.schemas.review_models import ReviewReport, ReviewSignals
from devflow.schemas.workflow_models import SessionState, StepStatus
from devflow.toolchain.detection import detect_test_commands
from devflow.toolchain.git_history import recent_commits
from devflow.workflow.state import load_session_state
from devflow.workflow.steps import load_steps, partition_steps

LOGGER = logging.getLogger(__name__)

DEFAULT_APPROVED_STATUSES = ("approved",)


def resolve_next_step(
    state: SessionState,
    missing_steps: list[StepStatus],
) -> tuple[StepStatus | None, str | None]:
    """Pick the recommended next step.

    The state's `suggestedNext` wins only while it still names a missing step;
    otherwise it is reported back as stale and the first missing step is used.
    Returns `(next_step, stale_override)`.
    """
    override = state.suggested_next
    by_identifier = {step.definition.identifier: step for step in missing_steps}
    if override and override in by_identifier:
        return by_identifier[override], None

    stale = override or None
    if stale:
        LOGGER.info("Ignoring suggestedNext=%s: not a missing step", stale)
    return (missing_steps[0] if missing_steps else None), stale


def build_suggestions(
    *,
    next_step: StepStatus | None,
    completed_steps: list[StepStatus],
    missing_steps: list[StepStatus],
    state: SessionState,
    signals: ReviewSignals,
    build_ok_status: str = BUILD_OK_STATUS,
    approved_statuses: tuple[str, ...] = DEFAULT_APPROVED_STATUSES,
) -> list[str]:
    """Apply the suggestion rules in order; each adds at most one entry."""
    suggestions: list[str] = []

    if missing_steps and next_step is not None:
        definition = next_step.definition
        suggestions.append(
            f"Generate {definition.filename} ({definition.title}) to keep the flow complete."
        )
    elif not missing_steps:
        approved = {status.casefold() for status in approved_statuses}
        unapproved = [
            step.definition.identifier
            for step in completed_steps
            if (step.status or "").casefold() not in approved
        ]
        message = (
            "All step files exist; confirm each `status` is approved and the summaries are current."
        )
        if unapproved:
            message += f" Not yet approved: {', '.join(unapproved)}."
        suggestions.append(message)

    if signals.recommended_tests:
        suggestions.append(
            f"Run the recommended test command, for example: {signals.recommended_tests[0].command}"
        )

    if state.last_build_status and state.last_build_status != build_ok_status:
        suggestions.append(
            "The last build check did not pass; fix the build or tests before proceeding."
        )

    return suggestions


def aggregate_review(
    workspace_root: Path,
    signals: ReviewSignals,
    *,
    build_ok_status: str = BUILD_OK_STATUS,
    approved_statuses: tuple[str, ...] = DEFAULT_APPROVED_STATUSES,
) -> ReviewReport:
    """Combine on-disk workflow state with externally supplied signals.

    Never fails on unreadable records; those degrade to absent/default values.
    """
    steps = load_steps(workspace_root)
    state = load_session_state(workspace_root)
    completed_steps, missing_steps = partition_steps(steps)
    next_step, stale_override = resolve_next_step(state, missing_steps)

    suggestions = build_suggestions(
        next_step=next_step,
        completed_steps=completed_steps,
        missing_steps=missing_steps,
        state=state,
        signals=signals,
        build_ok_status=build_ok_status,
        approved_statuses=approved_statuses,
    )
    return ReviewReport(
        generated_at=isoformat_utc(utc_now()),
        state=state,
        steps=steps,
        completed_steps=completed_steps,
        missing_steps=missing_steps,
        recommended_next=next_step.definition.identifier if next_step else None,
        stale_suggested_next=stale_override,
        recommended_tests=list(signals.recommended_tests),
        recent_commits=list(signals.recent_commits),
        suggestions=suggestions,
    )


def gather_review_data(
    workspace_root: Path,
    *,
    commit_limit: int = 5,
    build_ok_status: str = BUILD_OK_STATUS,
    approved_statuses: tuple[str, ...] = DEFAULT_APPROVED_STATUSES,
) -> ReviewReport:
    """Collect collaborator signals for `workspace_root` and aggregate them."""
    root = workspace_root.resolve()
    signals = ReviewSignals(
        recommended_tests=detect_test_commands(root),
        recent_commits=recent_commits(root, limit=commit_limit),
    )
    return aggregate_review(
        root,
        signals,
        build_ok_status=build_ok_status,
        approved_statuses=approved_statuses,
    )
