"""Static catalog of workflow scenarios."""

from __future__ import annotations

from dataclasses import dataclass

GENERAL_SCENARIO_ID = "general"


@dataclass(frozen=True)
class Scenario:
    """A predefined development-workflow archetype."""

    id: str
    title: str
    keywords: tuple[str, ...]
    summary: str
    recommendations: tuple[str, ...]
    guidance_prompt: str


SCENARIOS: tuple[Scenario, ...] = (
    Scenario(
        id="feature",
        title="New feature development",
        keywords=("新增", "新功能", "feature", "实现", "开发", "添加", "构建", "需求"),
        summary=(
            "Adds new capability; focuses on user stories, acceptance criteria "
            "and the path to release."
        ),
        recommendations=(
            "In requirements, capture user stories, acceptance criteria and impact scope.",
            "In plan, list data flow, interfaces, dependencies and risks; sketch a prototype when useful.",
            "In impl, work through the todos in order and update notes and commits after each item.",
            "Before build-check, self-test the critical paths and confirm monitoring is ready.",
        ),
        guidance_prompt=(
            "This task adds a new feature. State user stories and acceptance criteria in "
            "requirements, break down the technical approach in plan, and follow the todos "
            "during impl while recording key commits."
        ),
    ),
    Scenario(
        id="bugfix",
        title="Defect fix",
        keywords=("修复", "bug", "缺陷", "问题", "异常", "故障", "报错", "崩溃", "fix"),
        summary=(
            "Locates and corrects a problem in an existing system; focuses on "
            "reproduction, root cause and regression tests."
        ),
        recommendations=(
            "In requirements, record reproduction steps, expected versus actual results and impact.",
            "In plan, list candidate root causes, the investigation path and modules to change.",
            "In impl, track each experiment and confirm the root cause before writing the final fix.",
            "In build-check or custom tests, concentrate on regression cases and edge conditions.",
        ),
        guidance_prompt=(
            "This task fixes a defect. Describe reproduction steps and impact in requirements, "
            "plan the investigation, record root-cause evidence and fix details during impl, "
            "and add regression tests."
        ),
    ),
    Scenario(
        id="architecture",
        title="Architecture design / expansion planning",
        keywords=("架构", "设计", "重构", "扩展", "规划", "演进", "方案", "抽象", "refactor"),
        summary=(
            "Plans system abstractions and their evolution; focuses on trade-offs, "
            "risks and a roadmap."
        ),
        recommendations=(
            "In requirements, state business goals, constraints, success metrics and non-goals.",
            "In plan, compare candidate architectures, analyse trade-offs and describe the migration path.",
            "In todos, list spikes, proofs of concept and milestones with their dependencies.",
            "In summary, record decisions, follow-up actions and risk mitigations.",
        ),
        guidance_prompt=(
            "This task is primarily architecture and design. Focus on producing options and "
            "trade-offs, risks and a migration plan; back claims with a proof of concept or "
            "scaffold when code is needed."
        ),
    ),
    Scenario(
        id="testing",
        title="Testing and quality assurance",
        keywords=("测试", "test", "覆盖率", "验证", "质量", "回归", "自动化", "用例", "checks"),
        summary=(
            "Builds and strengthens the test suite; focuses on verification strategy, "
            "case design and quality metrics."
        ),
        recommendations=(
            "In requirements, declare verification goals, risk areas and measures such as coverage or defect rate.",
            "In plan, lay out test-pyramid layers, tools, data preparation and environment dependencies.",
            "In todos, detail test cases, script work, CI integration and report output.",
            "In summary, report results, defect distribution and follow-up improvements.",
        ),
        guidance_prompt=(
            "This task focuses on testing and quality. Describe the verification scope, case "
            "design, automation scripts and metric trends, and add test code and reports "
            "during impl."
        ),
    ),
)

GENERAL_SCENARIO = Scenario(
    id=GENERAL_SCENARIO_ID,
    title="General development flow",
    keywords=(),
    summary=(
        "Default flow used when no specific scenario matches; the seven DevFlow "
        "steps still apply."
    ),
    recommendations=(
        "In requirements, clarify goals, constraints, dependencies and acceptance criteria.",
        "In plan, break the work down, identify risks and define a verification strategy.",
        "In impl, keep progress, commits and test results in sync.",
        "Keep the steps and state.json current so the next session can pick up accurately.",
    ),
    guidance_prompt=(
        "Follow the general DevFlow process: make sure every stage produces its artifact and "
        "keep commits and verification results in sync during implementation."
    ),
)


def get_scenarios() -> tuple[Scenario, ...]:
    """Return every scenario, fallback last."""
    return (*SCENARIOS, GENERAL_SCENARIO)


def get_scenario(scenario_id: str) -> Scenario:
    for scenario in get_scenarios():
        if scenario.id == scenario_id:
            return scenario
    raise KeyError(f"Unknown scenario: {scenario_id}")
