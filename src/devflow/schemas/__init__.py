"""Schema contract exports."""

from devflow.schemas.enums import BuildTaskStatus, BuildVerdict, CopyStatus, StepKind
from devflow.schemas.review_models import ReviewReport, ReviewSignals
from devflow.schemas.toolchain_models import (
    BuildCheckReport,
    BuildTaskResult,
    CommitInfo,
    TestRecommendation,
)
from devflow.schemas.workflow_models import (
    PresetRecord,
    PresetSummary,
    SessionMetrics,
    SessionState,
    StepDefinition,
    StepRecord,
    StepStatus,
)

__all__ = [
    "BuildCheckReport",
    "BuildTaskResult",
    "BuildTaskStatus",
    "BuildVerdict",
    "CommitInfo",
    "CopyStatus",
    "PresetRecord",
    "PresetSummary",
    "ReviewReport",
    "ReviewSignals",
    "SessionMetrics",
    "SessionState",
    "StepDefinition",
    "StepKind",
    "StepRecord",
    "StepStatus",
    "TestRecommendation",
]
