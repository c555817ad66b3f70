"""Review aggregation exports."""

from devflow.review.aggregator import (
    aggregate_review,
    build_suggestions,
    gather_review_data,
    resolve_next_step,
)
from devflow.review.renderer import (
    default_report_path,
    render_review_markdown,
    write_review_report,
)

__all__ = [
    "aggregate_review",
    "build_suggestions",
    "default_report_path",
    "gather_review_data",
    "render_review_markdown",
    "resolve_next_step",
    "write_review_report",
]
