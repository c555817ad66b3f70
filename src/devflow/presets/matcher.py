"""Keyword scoring of free-text intent against the scenario catalog."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime

from devflow.clock import isoformat_utc, utc_now
from devflow.presets.catalog import GENERAL_SCENARIO, SCENARIOS, Scenario
from devflow.schemas.workflow_models import PresetRecord, PresetSummary

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScenarioScore:
    """Score of one scenario for a given intent."""

    scenario: Scenario
    score: int
    matched_keywords: tuple[str, ...]


@dataclass(frozen=True)
class MatchResult:
    """Chosen scenario plus the full ranking kept for diagnostics."""

    scenario: Scenario
    matched_keywords: tuple[str, ...]
    ranking: tuple[ScenarioScore, ...]

    @property
    def is_fallback(self) -> bool:
        return self.scenario is GENERAL_SCENARIO


def score_scenario(scenario: Scenario, normalized_intent: str) -> ScenarioScore:
    matched = tuple(
        keyword for keyword in scenario.keywords if keyword.casefold() in normalized_intent
    )
    return ScenarioScore(scenario=scenario, score=len(matched), matched_keywords=matched)


def match_preset(intent: str, scenarios: tuple[Scenario, ...] = SCENARIOS) -> MatchResult:
    """Select a scenario by keyword count, breaking ties by ascending id."""
    normalized = intent.casefold()
    ranking = tuple(
        sorted(
            (score_scenario(scenario, normalized) for scenario in scenarios),
            key=lambda item: (-item.score, item.scenario.id),
        )
    )
    LOGGER.debug(
        "Scenario ranking: %s",
        ", ".join(f"{item.scenario.id}={item.score}" for item in ranking),
    )

    top = ranking[0] if ranking else None
    if top is None or top.score <= 0:
        return MatchResult(scenario=GENERAL_SCENARIO, matched_keywords=(), ranking=ranking)
    return MatchResult(
        scenario=top.scenario,
        matched_keywords=top.matched_keywords,
        ranking=ranking,
    )


def build_preset_record(
    intent: str,
    result: MatchResult,
    *,
    detected_at: datetime | None = None,
) -> PresetRecord:
    """Project a match into the persisted `preset.json` shape."""
    scenario = result.scenario
    return PresetRecord(
        intent=intent,
        detected_at=isoformat_utc(detected_at or utc_now()),
        preset=PresetSummary(id=scenario.id, title=scenario.title, summary=scenario.summary),
        matched_keywords=list(result.matched_keywords),
        recommendations=list(scenario.recommendations),
        guidance_prompt=scenario.guidance_prompt,
    )
