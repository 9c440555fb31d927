"""Read-only catalog of protection and progression rules.

Responsibilities:
  - Hold community rules keyed by community id (ordered per community).
  - Hold progression rules keyed by (from_stage, to_stage).

Inputs/Outputs:
  - Inputs: seed tables plus optional extra community rules from a rule source.
  - Outputs: immutable lookups shared by the engines.

Invariants:
  - Built once at startup; never mutated afterwards, so concurrent reads need no locking.
  - Rule ids are unique within a community.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Sequence

from journeygate.core.domain.enums import JourneyStage
from journeygate.core.domain.models import CommunityInteractionRule, ProgressionRule
from .seed_rules import DEFAULT_COMMUNITY, SEED_COMMUNITY_RULES, SEED_PROGRESSION_RULES

StagePair = tuple[JourneyStage, JourneyStage]


class RuleCatalog:
    def __init__(
        self,
        community_rules: Mapping[str, Sequence[CommunityInteractionRule]],
        progression_rules: Iterable[ProgressionRule],
    ) -> None:
        frozen: dict[str, tuple[CommunityInteractionRule, ...]] = {}
        for community_id, rules in community_rules.items():
            rules = tuple(rules)
            ids = [r.id for r in rules]
            dupes = sorted({i for i in ids if ids.count(i) > 1})
            if dupes:
                raise ValueError(f"Duplicate rule ids in community '{community_id}': {dupes}")
            frozen[community_id] = rules
        self._community_rules = MappingProxyType(frozen)

        by_pair: dict[StagePair, ProgressionRule] = {}
        for rule in progression_rules:
            key = (rule.from_stage, rule.to_stage)
            if key in by_pair:
                raise ValueError(f"Duplicate progression rule: {key[0].value} -> {key[1].value}")
            by_pair[key] = rule
        self._progression_rules = MappingProxyType(by_pair)

    def community_rules(self, community_id: str) -> tuple[CommunityInteractionRule, ...]:
        return self._community_rules.get(community_id, ())

    def community_ids(self) -> list[str]:
        return sorted(self._community_rules.keys())

    def progression_rule(self, from_stage: JourneyStage, to_stage: JourneyStage) -> Optional[ProgressionRule]:
        return self._progression_rules.get((from_stage, to_stage))

    def progression_pairs(self) -> list[StagePair]:
        return list(self._progression_rules.keys())


def build_default_catalog(
    extra_community_rules: Optional[Mapping[str, Sequence[CommunityInteractionRule]]] = None,
) -> RuleCatalog:
    """Seed catalog; extra rules extend the "default" bucket or add new communities."""
    community_rules: dict[str, list[CommunityInteractionRule]] = {
        DEFAULT_COMMUNITY: list(SEED_COMMUNITY_RULES),
    }
    for community_id, rules in (extra_community_rules or {}).items():
        community_rules.setdefault(community_id, []).extend(rules)
    return RuleCatalog(community_rules, SEED_PROGRESSION_RULES)
