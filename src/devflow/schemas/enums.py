"""Enum definitions for canonical contracts."""

from __future__ import annotations

from enum import Enum


class CopyStatus(str, Enum):
    COPIED = "copied"
    OVERWRITTEN = "overwritten"
    SKIPPED = "skipped"


class BuildTaskStatus(str, Enum):
    OK = "ok"
    FAILED = "failed"
    SKIPPED = "skipped"


class BuildVerdict(str, Enum):
    OK = "ok"
    FAILED = "failed"


class StepKind(str, Enum):
    REQUIREMENTS = "requirements"
    API_CONTRACT = "api-contract"
    PLAN = "plan"
    TODOS = "todos"
    IMPL = "impl"
    BUILD_CHECK = "build-check"
    SUMMARY = "summary"
