"""Acceptance matrix: full workflow against a scaffolded workspace."""

from __future__ import annotations

from pathlib import Path

import orjson
import pytest
from typer.testing import CliRunner

import devflow.cli as cli_module
import devflow.review.aggregator as aggregator_module
from devflow.presets import match_preset
from devflow.review import aggregate_review
from devflow.schemas.review_models import ReviewSignals
from devflow.templates import TEMPLATE_ROOT, synchronize_template
from devflow.workflow.state import default_session_state, load_session_state


@pytest.fixture(autouse=True)
def _no_git(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(aggregator_module, "recent_commits", lambda root, limit=5: [])


@pytest.mark.parametrize(
    ("intent", "expected_id", "expected_keywords"),
    [
        ("需要修复支付接口的 bug", "bugfix", {"修复", "bug"}),
        ("探索新的商业机会", "general", set()),
        ("重构支付模块的架构", "architecture", {"架构", "重构"}),
        ("补充回归测试用例", "testing", {"测试", "回归", "用例"}),
    ],
)
def test_intent_matrix(intent: str, expected_id: str, expected_keywords: set[str]) -> None:
    result = match_preset(intent)
    assert result.scenario.id == expected_id
    assert set(result.matched_keywords) == expected_keywords
    if not expected_keywords:
        assert all(item.score == 0 for item in result.ranking)


def test_only_requirements_step_present(tmp_path: Path) -> None:
    synchronize_template(TEMPLATE_ROOT, tmp_path)
    (tmp_path / ".devflow" / "steps" / "step-01.requirements.json").write_text(
        '{"summary": "scope agreed", "status": "approved"}', encoding="utf-8"
    )

    report = aggregate_review(tmp_path, ReviewSignals())

    assert len(report.completed_steps) == 1
    assert report.missing_steps[0].definition.identifier == "step-02.api-contract"
    assert report.recommended_next == "step-02.api-contract"


def test_full_session_lifecycle(tmp_path: Path) -> None:
    """init -> wizard -> steps -> review -> cleanup -> review."""
    runner = CliRunner()
    root = str(tmp_path)

    assert runner.invoke(cli_module.app, ["init", root]).exit_code == 0

    wizard = runner.invoke(cli_module.app, ["wizard", "需要修复支付接口的", "bug", "--cwd", root])
    assert wizard.exit_code == 0, wizard.output
    preset = orjson.loads((tmp_path / ".devflow" / "preset.json").read_bytes())
    assert preset["preset"]["id"] == "bugfix"
    assert set(preset["matchedKeywords"]) == {"修复", "bug"}

    steps_dir = tmp_path / ".devflow" / "steps"
    for name in (
        "step-01.requirements",
        "step-02.api-contract",
        "step-03.plan",
        "step-04.todos",
        "step-05.impl",
        "step-06.build-check",
        "step-07.summary",
    ):
        (steps_dir / f"{name}.json").write_text('{"status": "approved"}', encoding="utf-8")

    complete = tmp_path / "complete.md"
    review = runner.invoke(cli_module.app, ["review", "--cwd", root, "-o", str(complete)])
    assert review.exit_code == 0, review.output
    markdown = complete.read_text(encoding="utf-8")
    assert "- Progress: 7/7" in markdown
    assert "all stages complete" in markdown
    assert "## Missing Step Artifacts" not in markdown

    cleanup = runner.invoke(cli_module.app, ["cleanup", "--cwd", root])
    assert cleanup.exit_code == 0, cleanup.output
    assert load_session_state(tmp_path) == default_session_state()
    assert orjson.loads((tmp_path / ".devflow" / "preset.json").read_bytes())["preset"] is None
    archives = [path for path in (tmp_path / ".devflow" / "history").iterdir() if path.is_dir()]
    assert len(archives) == 1
    assert len(list(archives[0].glob("step-*.json"))) == 7

    fresh = tmp_path / "fresh.md"
    review = runner.invoke(cli_module.app, ["review", "--cwd", root, "-o", str(fresh)])
    assert review.exit_code == 0, review.output
    assert "- Recommended next: step-01.requirements" in fresh.read_text(encoding="utf-8")
