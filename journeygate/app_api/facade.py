from __future__ import annotations

import logging
from typing import Iterable, Optional

from journeygate.core.catalog.rule_catalog import RuleCatalog
from journeygate.core.catalog.stage_tables import (
    DEFAULT_TARGET_BENEFIT,
    TARGET_STAGE_BENEFIT,
    interaction_impact,
)
from journeygate.core.domain.enums import JourneyStage
from journeygate.core.domain.models import (
    CommunityContext,
    LiberationValues,
    ParticipationResult,
    ProgressionResult,
    ProtectionDecision,
    ValidationResult,
)
from journeygate.core.domain.transition_graph import next_stage
from journeygate.core.engine.participation import ParticipationEvaluator
from journeygate.core.engine.progression import NoProgressionRule, ProgressionEngine
from journeygate.core.engine.protection import ProtectionEngine
from journeygate.core.engine.result import BatchError, BatchResult, OperationResult
from journeygate.core.values.validator import MIN_CREATOR_SOVEREIGNTY, validate
from .dto import EvaluationRequest
from .providers.guarded_support_oracle import GuardedSupportOracle

logger = logging.getLogger(__name__)

ALIGNED_REASONING = "Liberation values aligned, community protection satisfied"


def _sovereignty_compliant(values: LiberationValues) -> bool:
    return values.creator_sovereignty >= MIN_CREATOR_SOVEREIGNTY


def _mean(items: list[float]) -> float:
    return sum(items) / len(items) if items else 0.0


class JourneyGateApplication:
    def __init__(
        self,
        catalog: RuleCatalog,
        protection_engine: ProtectionEngine,
        progression_engine: ProgressionEngine,
        participation_evaluator: ParticipationEvaluator,
        support_oracle: Optional[GuardedSupportOracle] = None,
    ) -> None:
        self._catalog = catalog
        self._protection = protection_engine
        self._progression = progression_engine
        self._participation = participation_evaluator
        self._support_oracle = support_oracle

    def __enter__(self) -> "JourneyGateApplication":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """Release the support-oracle worker pool; safe to call more than once."""
        if self._support_oracle is not None:
            self._support_oracle.close()

    @property
    def catalog(self) -> RuleCatalog:
        return self._catalog

    def validate_interaction(
        self,
        member_id: str,
        community_id: str,
        interaction_type: str,
        stage: JourneyStage,
        values: LiberationValues,
    ) -> OperationResult[ProtectionDecision]:
        validation = validate(values)
        engine_decision = self._protection.decide(member_id, community_id, interaction_type, stage, values)
        impact = interaction_impact(stage, values, engine_decision.allow)

        decision = ProtectionDecision(
            allow=engine_decision.allow and validation.is_valid,
            reasoning=_interaction_reasoning(engine_decision, validation),
            protection_measures=engine_decision.protection_measures,
            empowerment_opportunities=engine_decision.empowerment_opportunities,
            liberation_impact=impact,
        )

        benefit = 0.5
        if decision.allow:
            benefit += 0.3
        benefit += len(decision.empowerment_opportunities) * 0.1
        benefit += decision.liberation_impact * 0.2

        recommendations: list[str] = []
        if not decision.allow:
            recommendations.append("Review community guidelines and liberation principles")
            recommendations.append("Engage with community support resources")
        if decision.empowerment_opportunities:
            top = ", ".join(decision.empowerment_opportunities[:2])
            recommendations.append(f"Explore empowerment opportunities: {top}")
        recommendations.append("Connect with peer support and community resources")

        return OperationResult(
            success=True,
            data=decision,
            validation=validation,
            empowerment_impact=impact,
            community_benefit=min(benefit, 1.0),
            sovereignty_compliance=_sovereignty_compliant(values),
            recommendations=recommendations,
            violations=validation.violations,
        )

    def progress_journey(
        self,
        member_id: str,
        from_stage: JourneyStage,
        to_stage: JourneyStage,
        context: CommunityContext,
        values: LiberationValues,
    ) -> OperationResult[ProgressionResult]:
        validation = validate(values)
        progression = self._progression.attempt_progression(member_id, from_stage, to_stage, context, values)
        rule = progression.rule

        recommendations: list[str] = []
        if not progression.readiness:
            recommendations.append("Build liberation values alignment through community engagement")
        if not progression.empowerment_met:
            top = ", ".join(rule.empowerment_requirements[:2])
            recommendations.append(f"Develop empowerment requirements: {top}")
        if rule.community_validation:
            recommendations.append("Engage with community for validation and support")
        recommendations.append("Continue community participation and peer support")

        return OperationResult(
            success=progression.allowed,
            data=progression,
            validation=validation,
            empowerment_impact=(
                values.black_queer_empowerment * 0.4
                + values.community_protection * 0.3
                + values.cultural_authenticity * 0.3
            ),
            community_benefit=TARGET_STAGE_BENEFIT.get(rule.to_stage, DEFAULT_TARGET_BENEFIT),
            sovereignty_compliance=_sovereignty_compliant(values),
            recommendations=recommendations,
            violations=validation.violations,
        )

    def advance_journey(
        self,
        member_id: str,
        current_stage: JourneyStage,
        context: CommunityContext,
        values: LiberationValues,
    ) -> OperationResult[ProgressionResult]:
        target = next_stage(current_stage)
        if target is None:
            raise NoProgressionRule(current_stage, current_stage)
        return self.progress_journey(member_id, current_stage, target, context, values)

    def evaluate_participation(
        self,
        participant_id: str,
        participation_type: str,
        context: CommunityContext,
        values: LiberationValues,
    ) -> OperationResult[ParticipationResult]:
        validation = validate(values)
        result = self._participation.evaluate(participant_id, participation_type, context, values)

        recommendations: list[str] = []
        if result.participation_score < 0.7:
            recommendations.append("Enhance participation quality through community engagement")
        if result.liberation_alignment < 0.8:
            recommendations.append("Align participation with liberation values and community goals")
        recommendations.append("Utilize accessibility measures for inclusive participation")

        return OperationResult(
            success=result.is_valid,
            data=result,
            validation=validation,
            empowerment_impact=result.empowerment_level,
            community_benefit=result.empowerment_level * result.liberation_alignment,
            sovereignty_compliance=_sovereignty_compliant(values),
            recommendations=recommendations,
            violations=validation.violations,
        )

    def process_request(self, request: EvaluationRequest) -> OperationResult:
        request.validate()
        if request.operation == "community_interaction":
            return self.validate_interaction(
                request.member_id,
                request.community_id,
                request.interaction_type,
                request.stage,
                request.values,
            )
        if request.operation == "journey_progression":
            return self.progress_journey(
                request.member_id,
                request.stage,
                request.target_stage,
                request.context,
                request.values,
            )
        return self.evaluate_participation(
            request.member_id,
            request.participation_type,
            request.context,
            request.values,
        )

    def process_batch(self, requests: Iterable[EvaluationRequest]) -> BatchResult:
        results: list[OperationResult] = []
        errors: list[BatchError] = []
        for idx, request in enumerate(requests):
            try:
                results.append(self.process_request(request))
            except (NoProgressionRule, ValueError) as exc:
                logger.warning("Batch request %d (%s) rejected: %s", idx, request.operation, exc)
                errors.append(BatchError(index=idx, operation=request.operation, message=str(exc)))

        return BatchResult(
            results=results,
            overall_liberation_score=_mean([r.validation.empowerment_score for r in results]),
            aggregate_empowerment=_mean([r.empowerment_impact for r in results]),
            community_impact=_mean([r.community_benefit for r in results]),
            systemic_recommendations=_systemic_recommendations(results),
            errors=errors,
        )


def _interaction_reasoning(decision: ProtectionDecision, validation: ValidationResult) -> str:
    reasons: list[str] = []
    if decision.reasoning:
        reasons.append(decision.reasoning)
    if not decision.allow:
        reasons.append("Community protection mechanisms activated")
    if not validation.is_valid:
        reasons.append("Liberation values validation failed")
    if validation.violations:
        reasons.append(f"Liberation violations: {len(validation.violations)}")
    return "; ".join(reasons) or ALIGNED_REASONING


def _systemic_recommendations(results: list[OperationResult]) -> list[str]:
    total = len(results)
    failed = sum(1 for r in results if not r.success)
    low_empowerment = sum(1 for r in results if r.empowerment_impact < 0.6)
    sovereignty_gaps = sum(1 for r in results if not r.sovereignty_compliance)

    recommendations: list[str] = []
    if failed > total * 0.2:
        recommendations.append("Review rejected operations for systematic issues")
    if low_empowerment > total * 0.3:
        recommendations.append("Focus on increasing empowerment impact across all operations")
    if sovereignty_gaps > total * 0.1:
        recommendations.append("Address creator sovereignty violations systematically")
    recommendations.append("Continue monitoring liberation metrics and community impact")
    return recommendations
