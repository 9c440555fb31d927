"""Protection-rule matching for a single community interaction.

Responsibilities:
  - Select community rules applicable to the member's current stage.
  - Accumulate protection measures and deny when a rule fails values validation.
  - Attach stage-based empowerment opportunities.

Inputs/Outputs:
  - Inputs: community id, stage, caller values, and the injected RuleCatalog.
  - Outputs: ProtectionDecision; the caller ANDs allow with its own values check.

Invariants:
  - Rules are checked in catalog order; every applicable rule is visited.
  - Vulnerable stages always receive the extra protection measures.
  - Each rule validates its own requirements against the global minimums, not the
    caller's values; kept for compatibility with existing decisions.
"""

from __future__ import annotations

from journeygate.core.catalog.rule_catalog import RuleCatalog
from journeygate.core.catalog.stage_tables import identify_empowerment_opportunities
from journeygate.core.domain.enums import VULNERABLE_STAGE_MEASURES, VULNERABLE_STAGES, JourneyStage
from journeygate.core.domain.models import LiberationValues, ProtectionDecision
from journeygate.core.values.validator import validate

ALLOWED_IMPACT = 0.7
DENIED_IMPACT = 0.2


class ProtectionEngine:
    def __init__(self, catalog: RuleCatalog) -> None:
        self._catalog = catalog

    def decide(
        self,
        member_id: str,
        community_id: str,
        interaction_type: str,
        stage: JourneyStage,
        values: LiberationValues,
    ) -> ProtectionDecision:
        applicable = [
            rule for rule in self._catalog.community_rules(community_id) if stage in rule.applicable_stages
        ]

        allow = True
        measures: list[str] = []
        reasoning: list[str] = []
        for rule in applicable:
            measures.extend(rule.protection_mechanisms)
            if not validate(rule.liberation_requirements).is_valid:
                allow = False
                reasoning.append(f"Violated community rule: {rule.name} - Liberation requirements not met")

        if stage in VULNERABLE_STAGES:
            measures.extend(VULNERABLE_STAGE_MEASURES)

        return ProtectionDecision(
            allow=allow,
            reasoning="; ".join(reasoning),
            protection_measures=measures,
            empowerment_opportunities=identify_empowerment_opportunities(stage, values),
            liberation_impact=ALLOWED_IMPACT if allow else DENIED_IMPACT,
        )
