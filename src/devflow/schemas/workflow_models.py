"""Workspace record contracts: step artifacts, session state, preset record."""

from __future__ import annotations

from typing import Any

from pydantic import ConfigDict, Field

from devflow.constants import STEPS_DIR
from devflow.schemas.base import StrictSchemaModel, WorkspaceRecordModel
from devflow.schemas.enums import StepKind


class StepDefinition(StrictSchemaModel):
    """One of the seven fixed workflow stages."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    slot: int = Field(ge=1, le=7)
    kind: StepKind
    title: str = Field(min_length=1)

    @property
    def step_id(self) -> str:
        return f"step-{self.slot:02d}"

    @property
    def identifier(self) -> str:
        """Identifier such as `step-02.api-contract`."""
        return f"{self.step_id}.{self.kind.value}"

    @property
    def filename(self) -> str:
        return f"{self.identifier}.json"

    @property
    def relative_path(self) -> str:
        return f"{STEPS_DIR}/{self.filename}"


class StepRecord(WorkspaceRecordModel):
    """Advisory fields read from a step artifact; never validated further."""

    summary: str | None = None
    status: str | None = None


class StepStatus(StrictSchemaModel):
    """Presence and advisory fields for one step slot."""

    definition: StepDefinition
    path: str = Field(min_length=1)
    exists: bool
    summary: str | None = None
    status: str | None = None


class SessionMetrics(WorkspaceRecordModel):
    total_steps: int = Field(default=7, ge=0)
    passed: int = Field(default=0, ge=0)
    failed: int = Field(default=0, ge=0)
    warnings: int = Field(default=0, ge=0)


class SessionState(WorkspaceRecordModel):
    """Singleton workflow progress record stored in `.devflow/state.json`."""

    active_session: str | None = None
    current_step: str | None = None
    completed: list[str] = Field(default_factory=list)
    suggested_next: str | None = "step-01.requirements"
    last_build_status: str | None = None
    metrics: SessionMetrics = Field(default_factory=SessionMetrics)
    updated_at: str | None = None

    def to_record(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


class PresetSummary(WorkspaceRecordModel):
    id: str = Field(min_length=1)
    title: str = Field(min_length=1)
    summary: str = Field(min_length=1)


class PresetRecord(WorkspaceRecordModel):
    """Persisted projection of a scenario match (`.devflow/preset.json`)."""

    intent: str | None = None
    detected_at: str | None = None
    preset: PresetSummary | None = None
    matched_keywords: list[str] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)
    guidance_prompt: str = ""

    def to_record(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)
