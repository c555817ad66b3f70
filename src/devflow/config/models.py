"""Pydantic models for the workspace settings file."""

from __future__ import annotations

from pydantic import Field, field_validator

from devflow.constants import BUILD_OK_STATUS, REPORTS_DIR, SCHEMA_VERSION
from devflow.schemas.base import StrictSchemaModel


class ReviewConfig(StrictSchemaModel):
    """Controls for review aggregation and report placement."""

    commit_limit: int = Field(default=5, ge=0, le=100)
    build_ok_status: str = Field(default=BUILD_OK_STATUS, min_length=1)
    report_dir: str = Field(default=REPORTS_DIR, min_length=1)
    approved_statuses: list[str] = Field(default_factory=lambda: ["approved"])


class TemplateConfig(StrictSchemaModel):
    """Extra gitignore-style patterns excluded from template synchronization."""

    exclude_globs: list[str] = Field(default_factory=list)

    @field_validator("exclude_globs")
    @classmethod
    def strip_blank_patterns(cls, value: list[str]) -> list[str]:
        return [pattern.strip() for pattern in value if pattern.strip()]


class BuildCheckConfig(StrictSchemaModel):
    """Timeout applied to each external build-check task."""

    timeout_seconds: int = Field(default=600, gt=0)


class AppConfig(StrictSchemaModel):
    """Central application configuration."""

    schema_version: str = Field(default=SCHEMA_VERSION, min_length=1)
    review: ReviewConfig = Field(default_factory=ReviewConfig)
    template: TemplateConfig = Field(default_factory=TemplateConfig)
    build_check: BuildCheckConfig = Field(default_factory=BuildCheckConfig)
