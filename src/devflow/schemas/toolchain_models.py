"""Contracts for collaborator signals: detected commands, commits, build checks."""

from __future__ import annotations

from pydantic import Field

from devflow.schemas.base import StrictSchemaModel, WorkspaceRecordModel
from devflow.schemas.enums import BuildTaskStatus, BuildVerdict


class TestRecommendation(StrictSchemaModel):
    """A test/lint/typecheck command suggested by toolchain detection."""

    __test__ = False

    command: str = Field(min_length=1)
    reason: str = Field(min_length=1)


class CommitInfo(StrictSchemaModel):
    """One-line summary of a recent commit."""

    hash: str = Field(min_length=1)
    date: str
    message: str


class BuildTaskResult(WorkspaceRecordModel):
    """Outcome of one external build/lint/typecheck invocation."""

    label: str = Field(min_length=1)
    command: str = Field(min_length=1)
    status: BuildTaskStatus
    exit_code: int | None = None
    stdout: str = ""
    stderr: str = ""


class BuildCheckReport(WorkspaceRecordModel):
    """Aggregated build-check verdict."""

    started_at: str
    finished_at: str
    status: BuildVerdict
    tasks: list[BuildTaskResult] = Field(default_factory=list)
