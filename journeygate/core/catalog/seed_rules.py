"""Seed protection and progression rules.

Must not:
  - Be mutated at runtime; catalogs copy these into read-only mappings.
"""

from __future__ import annotations

from journeygate.core.domain.enums import JourneyStage
from journeygate.core.domain.models import CommunityInteractionRule, LiberationValues, ProgressionRule

DEFAULT_COMMUNITY = "default"


def _values(cs: float, bq: float, cp: float, ca: float) -> LiberationValues:
    return LiberationValues(
        creator_sovereignty=cs,
        anti_oppression_validation=True,
        black_queer_empowerment=bq,
        community_protection=cp,
        cultural_authenticity=ca,
    )


SEED_PROGRESSION_RULES: tuple[ProgressionRule, ...] = (
    ProgressionRule(
        from_stage=JourneyStage.CRISIS,
        to_stage=JourneyStage.STABILIZATION,
        liberation_criteria=_values(0.65, 0.6, 0.8, 0.7),
        empowerment_requirements=("safety_planning", "resource_connection", "community_support"),
        community_validation=True,
    ),
    ProgressionRule(
        from_stage=JourneyStage.STABILIZATION,
        to_stage=JourneyStage.GROWTH,
        liberation_criteria=_values(0.7, 0.7, 0.75, 0.75),
        empowerment_requirements=("skill_development", "peer_connection", "resource_stability"),
        community_validation=False,
    ),
    ProgressionRule(
        from_stage=JourneyStage.GROWTH,
        to_stage=JourneyStage.COMMUNITY_HEALING,
        liberation_criteria=_values(0.75, 0.8, 0.8, 0.8),
        empowerment_requirements=("peer_support_capacity", "healing_knowledge", "community_trust"),
        community_validation=True,
    ),
    ProgressionRule(
        from_stage=JourneyStage.COMMUNITY_HEALING,
        to_stage=JourneyStage.ADVOCACY,
        liberation_criteria=_values(0.8, 0.9, 0.85, 0.85),
        empowerment_requirements=("leadership_skills", "system_analysis", "movement_connection"),
        community_validation=True,
    ),
)

SEED_COMMUNITY_RULES: tuple[CommunityInteractionRule, ...] = (
    CommunityInteractionRule(
        id="anti_oppression_protection",
        name="Anti-Oppression Community Protection",
        description="Prevents interactions that perpetuate oppression",
        applicable_stages=frozenset(JourneyStage),
        liberation_requirements=_values(0.75, 0.6, 0.8, 0.7),
        protection_mechanisms=("content_review", "community_notification", "support_escalation"),
        empowerment_actions=("peer_support", "resource_connection", "healing_space_access"),
    ),
    CommunityInteractionRule(
        id="creator_sovereignty_protection",
        name="Creator Sovereignty Protection",
        description="Ensures creator rights and economic empowerment",
        applicable_stages=frozenset(
            {JourneyStage.GROWTH, JourneyStage.COMMUNITY_HEALING, JourneyStage.ADVOCACY}
        ),
        liberation_requirements=_values(0.75, 0.7, 0.75, 0.75),
        protection_mechanisms=("attribution_verification", "revenue_protection", "rights_enforcement"),
        empowerment_actions=("revenue_sharing", "attribution_amplification", "platform_promotion"),
    ),
)
