from __future__ import annotations

import pytest

from journeygate.core.domain.models import CommunityContext, LiberationValues
from journeygate.core.engine.participation import ACCESSIBILITY_MEASURES, ParticipationEvaluator


def test_strong_participation_is_valid():
    result = ParticipationEvaluator().evaluate(
        "p1", "vote", CommunityContext(), LiberationValues(0.8, True, 0.9, 0.9, 0.9)
    )
    assert result.is_valid
    assert result.participation_score == pytest.approx(0.9)
    assert result.empowerment_level == pytest.approx(0.81)
    assert result.liberation_alignment == pytest.approx(0.9)
    assert result.accessibility_measures == list(ACCESSIBILITY_MEASURES)


def test_low_participation_score_is_invalid():
    result = ParticipationEvaluator().evaluate(
        "p1", "vote", CommunityContext(), LiberationValues(0.8, True, 0.5, 0.6, 0.6)
    )
    assert result.participation_score == pytest.approx(0.56)
    assert not result.is_valid


def test_member_values_must_pass_validation():
    result = ParticipationEvaluator().evaluate(
        "p1", "vote", CommunityContext(), LiberationValues(0.8, False, 0.9, 0.9, 0.9)
    )
    assert result.participation_score >= 0.6
    assert result.liberation_alignment >= 0.7
    assert not result.is_valid


def test_accessibility_measures_ignore_context():
    context = CommunityContext(location="Leeds", accessibility_needs=("captioning",), cost_sensitive=True)
    result = ParticipationEvaluator().evaluate("p1", "forum", context, LiberationValues(0.8, True, 0.9, 0.9, 0.9))
    assert result.accessibility_measures == [
        "screen_reader_support",
        "multiple_language_options",
        "flexible_participation_formats",
    ]
