"""Tests for the application facade operations and batch aggregation."""

from __future__ import annotations

import pytest

from journeygate.app_api.dto import EvaluationRequest
from journeygate.app_api.facade import ALIGNED_REASONING
from journeygate.app_api.factories.build_app import build_journeygate_app
from journeygate.app_api.providers.static_support_oracle import StaticSupportOracle
from journeygate.core.domain.enums import JourneyStage
from journeygate.core.domain.models import CommunityContext, LiberationValues
from journeygate.core.engine.progression import NoProgressionRule

STRONG = LiberationValues(0.8, True, 0.85, 0.9, 0.85)
NO_ANTI_OPPRESSION = LiberationValues(0.8, False, 0.5, 0.5, 0.5)

_APPS = []


def mk_app(supported: bool = True):
    app = build_journeygate_app(support_oracle=StaticSupportOracle(supported))
    _APPS.append(app)
    return app


@pytest.fixture(autouse=True)
def _close_apps():
    yield
    while _APPS:
        _APPS.pop().close()


def test_interaction_allowed_for_aligned_values():
    result = mk_app().validate_interaction("m1", "default", "post", JourneyStage.GROWTH, STRONG)
    assert result.success
    assert result.data.allow
    assert result.data.reasoning == ALIGNED_REASONING
    assert result.data.liberation_impact == pytest.approx((0.5 + 0.3 * 0.85 + 0.2 * 0.9) * 0.9)
    assert result.empowerment_impact == result.data.liberation_impact
    assert result.community_benefit == 1.0
    assert result.sovereignty_compliance
    assert result.recommendations[-1] == "Connect with peer support and community resources"


def test_interaction_denied_by_caller_values_keeps_engine_impact():
    result = mk_app().validate_interaction("m1", "default", "post", JourneyStage.CRISIS, NO_ANTI_OPPRESSION)
    decision = result.data
    assert not decision.allow
    assert "vulnerable_stage_extra_protection" in decision.protection_measures
    assert "community_support_notification" in decision.protection_measures
    # The protection engine allowed it, so the impact formula runs on the allowed branch.
    assert decision.liberation_impact == pytest.approx((0.5 + 0.15 + 0.1) * 0.8)
    assert "Liberation values validation failed" in decision.reasoning
    assert "Liberation violations: 4" in decision.reasoning
    assert "Review community guidelines and liberation principles" in result.recommendations
    assert len(result.violations) == 4


def test_progress_journey_success_envelope():
    result = mk_app().progress_journey(
        "m1", JourneyStage.CRISIS, JourneyStage.STABILIZATION, CommunityContext(), STRONG
    )
    assert result.success
    assert result.data.allowed
    assert result.community_benefit == 0.6
    assert result.empowerment_impact == pytest.approx(0.4 * 0.85 + 0.3 * 0.9 + 0.3 * 0.85)
    assert "Engage with community for validation and support" in result.recommendations


def test_progress_journey_blocked_by_community():
    result = mk_app(False).progress_journey(
        "m1", JourneyStage.GROWTH, JourneyStage.COMMUNITY_HEALING, CommunityContext(), STRONG
    )
    assert not result.success
    assert not result.data.community_validation_passed


def test_progress_journey_without_rule_raises():
    with pytest.raises(NoProgressionRule):
        mk_app().progress_journey("m1", JourneyStage.CRISIS, JourneyStage.GROWTH, CommunityContext(), STRONG)


def test_advance_journey_follows_canonical_path():
    result = mk_app().advance_journey("m1", JourneyStage.GROWTH, CommunityContext(), STRONG)
    assert result.data.rule.to_stage == JourneyStage.COMMUNITY_HEALING
    with pytest.raises(NoProgressionRule):
        mk_app().advance_journey("m1", JourneyStage.ADVOCACY, CommunityContext(), STRONG)


def test_evaluate_participation_envelope():
    result = mk_app().evaluate_participation("p1", "vote", CommunityContext(), STRONG)
    assert result.success
    assert result.community_benefit == pytest.approx(result.data.empowerment_level * result.data.liberation_alignment)
    assert result.recommendations[-1] == "Utilize accessibility measures for inclusive participation"


def test_process_request_dispatches_by_operation():
    request = EvaluationRequest(
        operation="journey_progression",
        member_id="m1",
        values=STRONG,
        stage=JourneyStage.STABILIZATION,
        target_stage=JourneyStage.GROWTH,
    )
    result = mk_app().process_request(request)
    assert result.data.rule.from_stage == JourneyStage.STABILIZATION


def test_process_request_rejects_unknown_operation():
    request = EvaluationRequest(operation="resource_allocation", member_id="m1", values=STRONG)
    with pytest.raises(ValueError):
        mk_app().process_request(request)


def test_process_batch_aggregates_and_records_errors():
    requests = [
        EvaluationRequest(
            operation="community_interaction", member_id="m1", values=STRONG, stage=JourneyStage.GROWTH
        ),
        EvaluationRequest(
            operation="journey_progression",
            member_id="m2",
            values=STRONG,
            stage=JourneyStage.CRISIS,
            target_stage=JourneyStage.GROWTH,
        ),
        EvaluationRequest(operation="democratic_participation", member_id="m3", values=NO_ANTI_OPPRESSION),
    ]
    batch = mk_app().process_batch(requests)

    assert len(batch.results) == 2
    assert [(e.index, e.operation) for e in batch.errors] == [(1, "journey_progression")]
    assert batch.overall_liberation_score == pytest.approx((1.0 + 0.25) / 2)
    expected_empowerment = (batch.results[0].empowerment_impact + batch.results[1].empowerment_impact) / 2
    assert batch.aggregate_empowerment == pytest.approx(expected_empowerment)
    assert "Review rejected operations for systematic issues" in batch.systemic_recommendations
    assert batch.systemic_recommendations[-1] == "Continue monitoring liberation metrics and community impact"


def test_empty_batch():
    batch = mk_app().process_batch([])
    assert batch.results == []
    assert batch.overall_liberation_score == 0.0
    assert batch.systemic_recommendations == ["Continue monitoring liberation metrics and community impact"]


def test_progression_recommendation_lists_requirements_in_catalog_order():
    low_empowerment = LiberationValues(0.8, True, 0.5, 0.9, 0.85)
    result = mk_app().progress_journey(
        "m1", JourneyStage.CRISIS, JourneyStage.STABILIZATION, CommunityContext(), low_empowerment
    )
    assert not result.data.empowerment_met
    assert "Develop empowerment requirements: safety_planning, resource_connection" in result.recommendations


def test_closed_app_releases_support_oracle_pool():
    with build_journeygate_app(support_oracle=StaticSupportOracle(True)) as app:
        assert app.progress_journey(
            "m1", JourneyStage.CRISIS, JourneyStage.STABILIZATION, CommunityContext(), STRONG
        ).success
    app.close()
    with pytest.raises(RuntimeError):
        app.progress_journey("m1", JourneyStage.CRISIS, JourneyStage.STABILIZATION, CommunityContext(), STRONG)
