"""Review markdown rendering and persistence."""

from __future__ import annotations

from pathlib import Path

from devflow.review import render_review_markdown, write_review_report
from devflow.schemas.review_models import ReviewReport
from devflow.schemas.toolchain_models import CommitInfo, TestRecommendation
from devflow.workflow.state import default_session_state
from devflow.workflow.steps import STEP_DEFINITIONS
from devflow.schemas.workflow_models import StepStatus


def _report(tmp_path: Path, *, present: set[int], **overrides: object) -> ReviewReport:
    steps = [
        StepStatus(
            definition=definition,
            path=str(tmp_path / definition.relative_path),
            exists=definition.slot in present,
        )
        for definition in STEP_DEFINITIONS
    ]
    fields: dict[str, object] = {
        "generated_at": "2026-05-06T07:08:09.000Z",
        "state": default_session_state(),
        "steps": steps,
        "completed_steps": [step for step in steps if step.exists],
        "missing_steps": [step for step in steps if not step.exists],
        "suggestions": ["first suggestion", "second suggestion"],
    }
    fields.update(overrides)
    return ReviewReport.model_validate(fields)


def test_sections_render_in_fixed_order(tmp_path: Path) -> None:
    report = _report(
        tmp_path,
        present={1},
        recommended_next="step-02.api-contract",
        stale_suggested_next="step-01.requirements",
        recommended_tests=[TestRecommendation(command="pytest", reason="pyproject.toml detected")],
        recent_commits=[CommitInfo(hash="abc1234", date="2026-05-01", message="add api")],
    )

    markdown = render_review_markdown(report, tmp_path)
    headings = [line for line in markdown.splitlines() if line.startswith("#")]

    assert headings == [
        "# DevFlow Review (2026-05-06T07:08:09.000Z)",
        "## Status Overview",
        "## Missing Step Artifacts",
        "## Recommended Test Commands",
        "## Recent Commits",
        "## Next Suggestions",
    ]
    assert "- Recommended next: step-02.api-contract" in markdown
    assert "- Progress: 1/7" in markdown
    assert "`step-01.requirements`" in markdown
    assert "(missing file .devflow/steps/step-02.api-contract.json)" in markdown
    assert "- `pytest` - pyproject.toml detected" in markdown
    assert "- abc1234 (2026-05-01) add api" in markdown
    assert markdown.index("first suggestion") < markdown.index("second suggestion")


def test_complete_workspace_omits_missing_section(tmp_path: Path) -> None:
    report = _report(tmp_path, present={1, 2, 3, 4, 5, 6, 7})
    markdown = render_review_markdown(report, tmp_path)

    assert "## Missing Step Artifacts" not in markdown
    assert "all stages complete" in markdown
    assert "No commands detected" in markdown
    assert "commit history is unavailable" in markdown


def test_write_review_report_defaults_to_reports_dir(tmp_path: Path) -> None:
    target = write_review_report("# report\n", workspace_root=tmp_path)
    assert target.parent == tmp_path / ".devflow" / "reports"
    assert target.name.startswith("review-")
    assert ":" not in target.name
    assert target.read_text(encoding="utf-8") == "# report\n"


def test_write_review_report_honors_explicit_output(tmp_path: Path) -> None:
    output = tmp_path / "out" / "review.md"
    target = write_review_report("body", workspace_root=tmp_path, output=output)
    assert target == output
    assert output.read_text(encoding="utf-8") == "body"
