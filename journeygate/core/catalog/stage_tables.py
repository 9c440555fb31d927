"""Stage-keyed lookup tables shared by the engines and the app facade."""

from __future__ import annotations

from journeygate.core.domain.enums import JourneyStage
from journeygate.core.domain.models import LiberationValues

STAGE_OPPORTUNITIES: dict[JourneyStage, tuple[str, ...]] = {
    JourneyStage.CRISIS: ("peer_support_connection", "resource_navigation", "safety_planning"),
    JourneyStage.STABILIZATION: ("skill_building", "community_integration", "resource_development"),
    JourneyStage.GROWTH: ("leadership_development", "peer_mentoring", "advocacy_training"),
    JourneyStage.COMMUNITY_HEALING: ("healing_facilitation", "community_support", "knowledge_sharing"),
    JourneyStage.ADVOCACY: ("movement_leadership", "system_change", "community_organizing"),
}

EMPOWERMENT_BONUS_THRESHOLD = 0.8
EMPOWERMENT_BONUS = ("cultural_celebration", "visibility_amplification")
SOVEREIGNTY_BONUS = ("economic_empowerment", "revenue_sharing_optimization")

STAGE_IMPACT_MULTIPLIER: dict[JourneyStage, float] = {
    JourneyStage.CRISIS: 0.8,
    JourneyStage.STABILIZATION: 0.7,
    JourneyStage.GROWTH: 0.9,
    JourneyStage.COMMUNITY_HEALING: 1.0,
    JourneyStage.ADVOCACY: 1.0,
}
DEFAULT_IMPACT_MULTIPLIER = 0.6
BLOCKED_IMPACT = 0.2

# Community benefit of reaching a stage; unlisted targets fall back to the default.
TARGET_STAGE_BENEFIT: dict[JourneyStage, float] = {
    JourneyStage.STABILIZATION: 0.6,
    JourneyStage.GROWTH: 0.7,
    JourneyStage.COMMUNITY_HEALING: 0.9,
    JourneyStage.ADVOCACY: 1.0,
}
DEFAULT_TARGET_BENEFIT = 0.5

_missing = [s for s in JourneyStage if s not in STAGE_OPPORTUNITIES]
if _missing:
    raise RuntimeError(f"Missing STAGE_OPPORTUNITIES for: {[m.value for m in _missing]}")


def identify_empowerment_opportunities(stage: JourneyStage, values: LiberationValues) -> list[str]:
    opportunities = list(STAGE_OPPORTUNITIES.get(stage, ()))
    if values.black_queer_empowerment >= EMPOWERMENT_BONUS_THRESHOLD:
        opportunities.extend(EMPOWERMENT_BONUS)
    if values.creator_sovereignty >= EMPOWERMENT_BONUS_THRESHOLD:
        opportunities.extend(SOVEREIGNTY_BONUS)
    return opportunities


def interaction_impact(stage: JourneyStage, values: LiberationValues, allowed: bool) -> float:
    if not allowed:
        return BLOCKED_IMPACT
    impact = 0.5 + values.black_queer_empowerment * 0.3 + values.community_protection * 0.2
    impact *= STAGE_IMPACT_MULTIPLIER.get(stage, DEFAULT_IMPACT_MULTIPLIER)
    return min(impact, 1.0)
