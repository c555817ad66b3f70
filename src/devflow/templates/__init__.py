"""Template synchronization exports."""

from devflow.templates.filters import BOOKKEEPING_SEGMENTS, PathFilter, TemplateFilter, default_filter
from devflow.templates.synchronizer import (
    ALREADY_EXISTS_REASON,
    TEMPLATE_ROOT,
    CopyOutcome,
    list_template_files,
    synchronize_template,
)

__all__ = [
    "ALREADY_EXISTS_REASON",
    "BOOKKEEPING_SEGMENTS",
    "CopyOutcome",
    "PathFilter",
    "TEMPLATE_ROOT",
    "TemplateFilter",
    "default_filter",
    "list_template_files",
    "synchronize_template",
]
