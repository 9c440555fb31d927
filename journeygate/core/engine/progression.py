"""Journey progression gate for a single stage-to-stage move.

Responsibilities:
  - Resolve the progression rule for (from_stage, to_stage).
  - Combine readiness, community validation, empowerment and values gates.

Inputs/Outputs:
  - Inputs: stages, CommunityContext, member values, RuleCatalog, support oracle.
  - Outputs: ProgressionResult, or NoProgressionRule when no rule exists.

Invariants:
  - An absent (from, to) pair is an error for the call; there is no fallback rule.
  - Requirement tags are descriptive; the empowerment gate is a two-threshold check.
  - Deterministic for a deterministic oracle.
"""

from __future__ import annotations

from typing import Callable

from journeygate.core.catalog.rule_catalog import RuleCatalog
from journeygate.core.domain.enums import JourneyStage
from journeygate.core.domain.models import CommunityContext, LiberationValues, ProgressionResult
from journeygate.core.ports.support_oracle_port import CommunitySupportOracle
from journeygate.core.values.validator import validate

CRITERIA_READINESS_MIN = 0.7
MEMBER_READINESS_MIN = 0.6
EMPOWERMENT_GATE_MIN = 0.6
PROTECTION_GATE_MIN = 0.7

_DEBUG_FN: Callable[[str], None] | None = None


def set_progression_debug(fn: Callable[[str], None] | None) -> None:
    global _DEBUG_FN
    _DEBUG_FN = fn


class NoProgressionRule(LookupError):
    def __init__(self, from_stage: JourneyStage, to_stage: JourneyStage) -> None:
        super().__init__(f"No journey progression rule found: {from_stage.value} -> {to_stage.value}")
        self.from_stage = from_stage
        self.to_stage = to_stage


class ProgressionEngine:
    def __init__(self, catalog: RuleCatalog, support_oracle: CommunitySupportOracle) -> None:
        self._catalog = catalog
        self._support_oracle = support_oracle

    def attempt_progression(
        self,
        member_id: str,
        from_stage: JourneyStage,
        to_stage: JourneyStage,
        context: CommunityContext,
        values: LiberationValues,
    ) -> ProgressionResult:
        rule = self._catalog.progression_rule(from_stage, to_stage)
        if rule is None:
            raise NoProgressionRule(from_stage, to_stage)

        criteria_validation = validate(rule.liberation_criteria)
        member_validation = validate(values)
        readiness = (
            criteria_validation.empowerment_score >= CRITERIA_READINESS_MIN
            and member_validation.empowerment_score >= MEMBER_READINESS_MIN
        )

        community_validation_passed = True
        if rule.community_validation:
            community_validation_passed = bool(self._support_oracle.is_supported(member_id, rule, context))

        empowerment_met = (
            values.black_queer_empowerment >= EMPOWERMENT_GATE_MIN
            and values.community_protection >= PROTECTION_GATE_MIN
        )

        allowed = readiness and community_validation_passed and empowerment_met and member_validation.is_valid

        if _DEBUG_FN is not None:
            _DEBUG_FN(
                "PROGRESSION "
                f"member={member_id} from={from_stage.value} to={to_stage.value} "
                f"criteria_score={criteria_validation.empowerment_score:.2f} "
                f"member_score={member_validation.empowerment_score:.2f} "
                f"readiness={readiness} community={community_validation_passed} "
                f"empowerment={empowerment_met} allowed={allowed}"
            )

        return ProgressionResult(
            allowed=allowed,
            rule=rule,
            readiness=readiness,
            community_validation_passed=community_validation_passed,
            empowerment_met=empowerment_met,
        )
