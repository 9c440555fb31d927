"""Tests for liberation values validation."""

from __future__ import annotations

import itertools

import pytest

from journeygate.core.domain.enums import Severity, ViolationKind
from journeygate.core.domain.models import LiberationValues
from journeygate.core.values.validator import DIMENSION_WEIGHTS, REMEDIES, validate


def mk_values(
    cs: float = 0.8,
    ao: bool = True,
    bq: float = 0.85,
    cp: float = 0.9,
    ca: float = 0.85,
) -> LiberationValues:
    return LiberationValues(
        creator_sovereignty=cs,
        anti_oppression_validation=ao,
        black_queer_empowerment=bq,
        community_protection=cp,
        cultural_authenticity=ca,
    )


def test_all_dimensions_pass():
    result = validate(mk_values())
    assert result.is_valid
    assert result.violations == []
    assert result.recommendations == []
    assert result.empowerment_score == pytest.approx(1.0)


def test_weights_sum_to_one():
    assert sum(DIMENSION_WEIGHTS.values()) == pytest.approx(1.0)


def test_creator_sovereignty_boundary_passes_at_minimum():
    result = validate(mk_values(cs=0.75))
    assert result.is_valid
    assert result.violations == []


def test_creator_sovereignty_just_below_minimum_is_critical():
    result = validate(mk_values(cs=0.7499))
    assert not result.is_valid
    assert [(v.kind, v.severity) for v in result.violations] == [
        (ViolationKind.CREATOR_SOVEREIGNTY, Severity.CRITICAL)
    ]
    assert result.empowerment_score == pytest.approx(0.75)


def test_anti_oppression_false_is_critical():
    result = validate(mk_values(ao=False))
    assert not result.is_valid
    assert result.violations[0].kind == ViolationKind.ANTI_OPPRESSION
    assert result.violations[0].severity == Severity.CRITICAL


def test_major_and_minor_violations_keep_result_valid():
    result = validate(mk_values(bq=0.5, cp=0.6, ca=0.6))
    assert result.is_valid
    assert [(v.kind, v.severity) for v in result.violations] == [
        (ViolationKind.EMPOWERMENT, Severity.MAJOR),
        (ViolationKind.PROTECTION, Severity.MAJOR),
        (ViolationKind.AUTHENTICITY, Severity.MINOR),
    ]
    assert result.empowerment_score == pytest.approx(0.5)
    assert result.recommendations == [v.remedy for v in result.violations]


def test_all_violations_accumulate_without_short_circuit():
    result = validate(mk_values(cs=0.1, ao=False, bq=0.1, cp=0.1, ca=0.1))
    assert [v.kind for v in result.violations] == [
        ViolationKind.CREATOR_SOVEREIGNTY,
        ViolationKind.ANTI_OPPRESSION,
        ViolationKind.EMPOWERMENT,
        ViolationKind.PROTECTION,
        ViolationKind.AUTHENTICITY,
    ]
    assert result.empowerment_score == 0.0
    assert not result.is_valid


def test_description_embeds_actual_and_required_value():
    result = validate(mk_values(cs=0.5, ca=0.6))
    assert result.violations[0].description == "Creator sovereignty 0.5 below required 75% minimum"
    assert result.violations[1].description == "Cultural authenticity score 0.6 below required 65% minimum"
    assert result.violations[0].remedy == REMEDIES[ViolationKind.CREATOR_SOVEREIGNTY]


def test_identical_input_gives_identical_result():
    values = mk_values(cs=0.6, bq=0.4)
    assert validate(values) == validate(values)


def test_score_is_weight_sum_of_passing_dimensions_for_every_combination():
    kinds = [
        ViolationKind.CREATOR_SOVEREIGNTY,
        ViolationKind.ANTI_OPPRESSION,
        ViolationKind.EMPOWERMENT,
        ViolationKind.PROTECTION,
        ViolationKind.AUTHENTICITY,
    ]
    for passes in itertools.product([True, False], repeat=5):
        values = mk_values(
            cs=0.9 if passes[0] else 0.2,
            ao=passes[1],
            bq=0.9 if passes[2] else 0.2,
            cp=0.9 if passes[3] else 0.2,
            ca=0.9 if passes[4] else 0.2,
        )
        result = validate(values)
        expected = sum(DIMENSION_WEIGHTS[k] for k, ok in zip(kinds, passes) if ok)
        assert result.empowerment_score == pytest.approx(expected)
        assert result.is_valid == (passes[0] and passes[1])
        assert result.is_valid == (not result.has_severity(Severity.CRITICAL))


def test_description_renders_whole_numbers_without_decimal():
    result = validate(mk_values(cs=0.0, bq=0.0))
    assert result.violations[0].description == "Creator sovereignty 0 below required 75% minimum"
    assert result.violations[1].description == "Black queer empowerment score 0 below required 60% minimum"
