from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from journeygate.core.domain.enums import stage_from_value
from journeygate.core.domain.models import CommunityInteractionRule, LiberationValues


def _require(payload: dict[str, Any], key: str, expected_type: type, where: str) -> Any:
    if key not in payload:
        raise ValueError(f"Missing required field '{key}' in {where}")
    value = payload[key]
    if not isinstance(value, expected_type):
        raise ValueError(f"Field '{key}' in {where} must be {expected_type.__name__}")
    return value


def _str_list(payload: dict[str, Any], key: str, where: str) -> tuple[str, ...]:
    items = _require(payload, key, list, where)
    for item in items:
        if not isinstance(item, str) or not item.strip():
            raise ValueError(f"Field '{key}' in {where} must contain non-empty strings")
    return tuple(items)


def parse_community_rule(payload: Any) -> CommunityInteractionRule:
    if not isinstance(payload, dict):
        raise ValueError("Community rule must be a JSON object")
    rule_id = _require(payload, "id", str, "community rule")
    where = f"community rule '{rule_id}'"
    stages = _str_list(payload, "applicable_stages", where)
    if not stages:
        raise ValueError(f"Field 'applicable_stages' in {where} must not be empty")
    requirements = _require(payload, "liberation_requirements", dict, where)
    return CommunityInteractionRule(
        id=rule_id,
        name=_require(payload, "name", str, where),
        description=payload.get("description", ""),
        applicable_stages=frozenset(stage_from_value(s) for s in stages),
        liberation_requirements=LiberationValues.from_mapping(requirements),
        protection_mechanisms=_str_list(payload, "protection_mechanisms", where),
        empowerment_actions=_str_list(payload, "empowerment_actions", where),
    )


def parse_community_rules(payload: Any) -> dict[str, list[CommunityInteractionRule]]:
    if not isinstance(payload, dict):
        raise ValueError("Rule file must be a JSON object")
    communities = _require(payload, "communities", dict, "rule file")
    parsed: dict[str, list[CommunityInteractionRule]] = {}
    for community_id, rules in communities.items():
        if not community_id.strip():
            raise ValueError("Community id must be non-empty")
        if not isinstance(rules, list):
            raise ValueError(f"Rules for community '{community_id}' must be a list")
        parsed[community_id] = [parse_community_rule(r) for r in rules]
    return parsed


def load_community_rules(path: Path) -> dict[str, list[CommunityInteractionRule]]:
    if not path.exists():
        raise ValueError(f"Rule file not found: {path}")
    payload = json.loads(path.read_text(encoding="utf-8"))
    return parse_community_rules(payload)
