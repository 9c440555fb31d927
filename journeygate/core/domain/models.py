"""Domain models for values validation, rules and decisions.

Responsibilities:
  - Define immutable value objects (LiberationValues, rules, CommunityContext).
  - Define per-request result carriers (ValidationResult, decisions, results).

Inputs/Outputs:
  - Value objects are built by callers or catalog loaders and never mutated by engines.
  - Result carriers are created fresh per evaluation and discarded by callers.

Invariants:
  - Models carry no evaluation logic beyond input parsing.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from .enums import JourneyStage, Severity, ViolationKind


def _pick(payload: Mapping[str, Any], snake: str, camel: str) -> Any:
    if snake in payload:
        return payload[snake]
    if camel in payload:
        return payload[camel]
    raise ValueError(f"Missing required field '{snake}' in liberation values")


def _score(payload: Mapping[str, Any], snake: str, camel: str) -> float:
    value = _pick(payload, snake, camel)
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        raise ValueError(f"Field '{snake}' must be float")
    value = float(value)
    if not 0.0 <= value <= 1.0:
        raise ValueError(f"Field '{snake}' must be within [0, 1]")
    return value


@dataclass(frozen=True)
class LiberationValues:
    creator_sovereignty: float
    anti_oppression_validation: bool
    black_queer_empowerment: float
    community_protection: float
    cultural_authenticity: float

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any]) -> "LiberationValues":
        """Build values from a request payload; accepts snake_case or camelCase keys."""
        if not isinstance(payload, Mapping):
            raise ValueError("Liberation values must be a JSON object")
        anti_oppression = _pick(payload, "anti_oppression_validation", "antiOppressionValidation")
        if not isinstance(anti_oppression, bool):
            raise ValueError("Field 'anti_oppression_validation' must be bool")
        return cls(
            creator_sovereignty=_score(payload, "creator_sovereignty", "creatorSovereignty"),
            anti_oppression_validation=anti_oppression,
            black_queer_empowerment=_score(payload, "black_queer_empowerment", "blackQueerEmpowerment"),
            community_protection=_score(payload, "community_protection", "communityProtection"),
            cultural_authenticity=_score(payload, "cultural_authenticity", "culturalAuthenticity"),
        )


@dataclass(frozen=True)
class Violation:
    kind: ViolationKind
    severity: Severity
    description: str
    remedy: str


@dataclass
class ValidationResult:
    is_valid: bool
    violations: list[Violation]
    empowerment_score: float
    recommendations: list[str]

    def has_severity(self, severity: Severity) -> bool:
        return any(v.severity == severity for v in self.violations)


@dataclass(frozen=True)
class ProgressionRule:
    from_stage: JourneyStage
    to_stage: JourneyStage
    liberation_criteria: LiberationValues
    empowerment_requirements: tuple[str, ...]
    community_validation: bool


@dataclass(frozen=True)
class CommunityInteractionRule:
    id: str
    name: str
    description: str
    applicable_stages: frozenset[JourneyStage]
    liberation_requirements: LiberationValues
    protection_mechanisms: tuple[str, ...]
    empowerment_actions: tuple[str, ...]


@dataclass
class ProtectionDecision:
    allow: bool
    reasoning: str
    protection_measures: list[str]
    empowerment_opportunities: list[str]
    liberation_impact: float


@dataclass
class ProgressionResult:
    allowed: bool
    rule: ProgressionRule
    readiness: bool
    community_validation_passed: bool
    empowerment_met: bool


@dataclass
class ParticipationResult:
    is_valid: bool
    participation_score: float
    empowerment_level: float
    accessibility_measures: list[str]
    liberation_alignment: float


ACCESSIBILITY_NEEDS = frozenset(
    {
        "screen_reader",
        "captioning",
        "sign_language",
        "large_print",
        "step_free_access",
        "quiet_space",
    }
)

_CONTEXT_KEYS = {
    "location": "location",
    "accessibility_needs": "accessibility_needs",
    "accessibilityNeeds": "accessibility_needs",
    "cost_sensitive": "cost_sensitive",
    "costSensitive": "cost_sensitive",
    "language": "language",
}


@dataclass(frozen=True)
class CommunityContext:
    """Typed request context shared by the progression and participation evaluators."""

    location: Optional[str] = None
    accessibility_needs: tuple[str, ...] = field(default_factory=tuple)
    cost_sensitive: bool = False
    language: Optional[str] = None

    def validate(self) -> None:
        if self.location is not None and not self.location.strip():
            raise ValueError("location must be non-empty when provided")
        if self.language is not None and not self.language.strip():
            raise ValueError("language must be non-empty when provided")
        unknown = [need for need in self.accessibility_needs if need not in ACCESSIBILITY_NEEDS]
        if unknown:
            raise ValueError(f"Unknown accessibility needs: {sorted(unknown)}")

    @classmethod
    def from_mapping(cls, payload: Optional[Mapping[str, Any]]) -> "CommunityContext":
        if payload is None:
            return cls()
        if not isinstance(payload, Mapping):
            raise ValueError("context must be a JSON object")
        kwargs: dict[str, Any] = {}
        for key, value in payload.items():
            if key not in _CONTEXT_KEYS:
                raise ValueError(f"Unsupported context key: {key}")
            kwargs[_CONTEXT_KEYS[key]] = value
        needs = kwargs.get("accessibility_needs") or ()
        if isinstance(needs, str) or not all(isinstance(n, str) for n in needs):
            raise ValueError("accessibility_needs must be a list of strings")
        kwargs["accessibility_needs"] = tuple(needs)
        if not isinstance(kwargs.get("cost_sensitive", False), bool):
            raise ValueError("cost_sensitive must be bool")
        for key in ("location", "language"):
            if kwargs.get(key) is not None and not isinstance(kwargs[key], str):
                raise ValueError(f"{key} must be a string")
        context = cls(**kwargs)
        context.validate()
        return context
