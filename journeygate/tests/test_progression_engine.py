"""Tests for journey progression gating."""

from __future__ import annotations

import pytest

from journeygate.core.catalog.rule_catalog import build_default_catalog
from journeygate.core.domain.enums import JourneyStage
from journeygate.core.domain.models import CommunityContext, LiberationValues, ProgressionRule
from journeygate.core.engine.progression import (
    NoProgressionRule,
    ProgressionEngine,
    set_progression_debug,
)

STRONG = LiberationValues(0.8, True, 0.85, 0.9, 0.85)


class FakeOracle:
    def __init__(self, supported: bool) -> None:
        self.supported = supported
        self.calls: list[tuple[str, ProgressionRule]] = []

    def is_supported(self, member_id: str, rule: ProgressionRule, context: CommunityContext) -> bool:
        self.calls.append((member_id, rule))
        return self.supported


def mk_engine(supported: bool = True) -> tuple[ProgressionEngine, FakeOracle]:
    oracle = FakeOracle(supported)
    return ProgressionEngine(build_default_catalog(), oracle), oracle


def test_missing_pair_raises_no_progression_rule():
    engine, _ = mk_engine()
    with pytest.raises(NoProgressionRule) as excinfo:
        engine.attempt_progression("m1", JourneyStage.CRISIS, JourneyStage.GROWTH, CommunityContext(), STRONG)
    assert excinfo.value.from_stage == JourneyStage.CRISIS
    assert excinfo.value.to_stage == JourneyStage.GROWTH


def test_backward_move_has_no_rule():
    engine, _ = mk_engine()
    with pytest.raises(NoProgressionRule):
        engine.attempt_progression("m1", JourneyStage.GROWTH, JourneyStage.CRISIS, CommunityContext(), STRONG)


def test_strong_member_progresses_out_of_crisis():
    engine, oracle = mk_engine(True)
    result = engine.attempt_progression(
        "m1", JourneyStage.CRISIS, JourneyStage.STABILIZATION, CommunityContext(), STRONG
    )
    assert result.readiness
    assert result.community_validation_passed
    assert result.empowerment_met
    assert result.allowed
    assert result.rule.to_stage == JourneyStage.STABILIZATION
    assert [c[0] for c in oracle.calls] == ["m1"]


def test_community_rejection_blocks_progression():
    engine, _ = mk_engine(False)
    result = engine.attempt_progression(
        "m1", JourneyStage.CRISIS, JourneyStage.STABILIZATION, CommunityContext(), STRONG
    )
    assert result.readiness
    assert not result.community_validation_passed
    assert not result.allowed


def test_oracle_skipped_when_rule_needs_no_community_validation():
    engine, oracle = mk_engine(False)
    result = engine.attempt_progression(
        "m1", JourneyStage.STABILIZATION, JourneyStage.GROWTH, CommunityContext(), STRONG
    )
    assert result.community_validation_passed
    assert result.allowed
    assert oracle.calls == []


def test_empowerment_gate_uses_two_thresholds():
    engine, _ = mk_engine()
    values = LiberationValues(0.8, True, 0.5, 0.9, 0.85)
    result = engine.attempt_progression(
        "m1", JourneyStage.CRISIS, JourneyStage.STABILIZATION, CommunityContext(), values
    )
    assert result.readiness
    assert not result.empowerment_met
    assert not result.allowed


def test_critical_member_violation_blocks_even_when_ready():
    engine, _ = mk_engine()
    values = LiberationValues(0.7, True, 0.85, 0.9, 0.85)
    result = engine.attempt_progression(
        "m1", JourneyStage.CRISIS, JourneyStage.STABILIZATION, CommunityContext(), values
    )
    assert result.readiness
    assert result.empowerment_met
    assert not result.allowed


def test_low_member_score_fails_readiness():
    engine, _ = mk_engine()
    values = LiberationValues(0.5, False, 0.85, 0.9, 0.85)
    result = engine.attempt_progression(
        "m1", JourneyStage.CRISIS, JourneyStage.STABILIZATION, CommunityContext(), values
    )
    assert not result.readiness
    assert not result.allowed


def test_debug_hook_receives_one_line_per_evaluation():
    engine, _ = mk_engine()
    lines: list[str] = []
    set_progression_debug(lines.append)
    try:
        engine.attempt_progression(
            "m1", JourneyStage.GROWTH, JourneyStage.COMMUNITY_HEALING, CommunityContext(), STRONG
        )
    finally:
        set_progression_debug(None)
    assert len(lines) == 1
    assert "from=growth to=community_healing" in lines[0]
