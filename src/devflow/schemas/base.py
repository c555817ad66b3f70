"""Shared schema base classes."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class StrictSchemaModel(BaseModel):
    """Base model with strict validation defaults."""

    model_config = ConfigDict(extra="forbid", validate_assignment=True, frozen=False)


class WorkspaceRecordModel(BaseModel):
    """Base model for JSON records stored under `.devflow/`.

    Wire keys are camelCase; unknown keys written by other tools are ignored.
    """

    model_config = ConfigDict(
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
        validate_assignment=True,
    )
