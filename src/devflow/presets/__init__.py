"""Scenario catalog and intent matching exports."""

from devflow.presets.catalog import (
    GENERAL_SCENARIO,
    GENERAL_SCENARIO_ID,
    SCENARIOS,
    Scenario,
    get_scenario,
    get_scenarios,
)
from devflow.presets.matcher import MatchResult, ScenarioScore, build_preset_record, match_preset

__all__ = [
    "GENERAL_SCENARIO",
    "GENERAL_SCENARIO_ID",
    "MatchResult",
    "SCENARIOS",
    "Scenario",
    "ScenarioScore",
    "build_preset_record",
    "get_scenario",
    "get_scenarios",
    "match_preset",
]
