"""Review report contracts."""

from __future__ import annotations

from pydantic import Field

from devflow.schemas.base import StrictSchemaModel
from devflow.schemas.toolchain_models import CommitInfo, TestRecommendation
from devflow.schemas.workflow_models import SessionState, StepStatus


class ReviewSignals(StrictSchemaModel):
    """Signals supplied by collaborators; the aggregator never detects them itself."""

    recommended_tests: list[TestRecommendation] = Field(default_factory=list)
    recent_commits: list[CommitInfo] = Field(default_factory=list)


class ReviewReport(StrictSchemaModel):
    """Aggregated workflow review."""

    generated_at: str = Field(min_length=1)
    state: SessionState
    steps: list[StepStatus] = Field(min_length=7, max_length=7)
    completed_steps: list[StepStatus] = Field(default_factory=list)
    missing_steps: list[StepStatus] = Field(default_factory=list)
    recommended_next: str | None = None
    stale_suggested_next: str | None = None
    recommended_tests: list[TestRecommendation] = Field(default_factory=list)
    recent_commits: list[CommitInfo] = Field(default_factory=list)
    suggestions: list[str] = Field(default_factory=list)
