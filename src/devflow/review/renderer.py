"""Markdown rendering and persistence of review reports."""

from __future__ import annotations

import os
from pathlib import Path

from devflow.clock import filesystem_timestamp
from devflow.constants import REPORTS_DIR
from devflow.schemas.review_models import ReviewReport


def render_review_markdown(report: ReviewReport, workspace_root: Path) -> str:
    """Render the report with fixed section ordering."""
    completed = len(report.completed_steps)
    total = len(report.steps)

    lines = [
        f"# DevFlow Review ({report.generated_at})",
        "",
        "## Status Overview",
        f"- Current step: {report.state.current_step or 'not started'}",
        f"- Recommended next: {report.recommended_next or 'all stages complete'}",
        f"- Progress: {completed}/{total}",
    ]
    if report.stale_suggested_next:
        lines.append(
            f"- Ignored stale suggestedNext: `{report.stale_suggested_next}`"
        )
    lines.append("")

    if report.missing_steps:
        lines.append("## Missing Step Artifacts")
        for step in report.missing_steps:
            definition = step.definition
            lines.append(
                f"- {definition.identifier} - {definition.title} "
                f"(missing file {_relative(step.path, workspace_root)})"
            )
        lines.append("")

    lines.append("## Recommended Test Commands")
    if report.recommended_tests:
        lines.extend(f"- `{item.command}` - {item.reason}" for item in report.recommended_tests)
    else:
        lines.append("- No commands detected; choose a test approach that fits the stack.")
    lines.append("")

    lines.append("## Recent Commits")
    if report.recent_commits:
        lines.extend(
            f"- {commit.hash} ({commit.date}) {commit.message}" for commit in report.recent_commits
        )
    else:
        lines.append("- Not a git repository, or commit history is unavailable.")
    lines.append("")

    lines.append("## Next Suggestions")
    lines.extend(f"- {suggestion}" for suggestion in report.suggestions)
    lines.append("")

    return "\n".join(lines)


def default_report_path(workspace_root: Path, report_dir: str = REPORTS_DIR) -> Path:
    return workspace_root / report_dir / f"review-{filesystem_timestamp()}.md"


def write_review_report(
    markdown: str,
    *,
    workspace_root: Path,
    output: Path | None = None,
    report_dir: str = REPORTS_DIR,
) -> Path:
    """Write the rendered report to `output` or the workspace reports dir."""
    target = output or default_report_path(workspace_root, report_dir)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(markdown, encoding="utf-8")
    return target


def _relative(path: str, root: Path) -> str:
    return Path(os.path.relpath(path, root)).as_posix()
