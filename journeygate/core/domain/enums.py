"""Domain enums for journey stages and validation outcomes.

Responsibilities:
  - Define JourneyStage identifiers used by catalogs, engines and requests.
  - Define violation kinds and severities produced by the values validator.

Invariants:
  - Enum values must remain stable; they are accepted verbatim from request payloads.
"""

from __future__ import annotations

from enum import Enum


class JourneyStage(Enum):
    CRISIS = "crisis"
    STABILIZATION = "stabilization"
    GROWTH = "growth"
    COMMUNITY_HEALING = "community_healing"
    ADVOCACY = "advocacy"


class ViolationKind(Enum):
    CREATOR_SOVEREIGNTY = "creator_sovereignty"
    ANTI_OPPRESSION = "anti_oppression"
    EMPOWERMENT = "empowerment"
    PROTECTION = "protection"
    AUTHENTICITY = "authenticity"


class Severity(Enum):
    CRITICAL = "critical"
    MAJOR = "major"
    MINOR = "minor"


# Stages that always receive the extra protection tags.
VULNERABLE_STAGES = frozenset({JourneyStage.CRISIS, JourneyStage.STABILIZATION})

VULNERABLE_STAGE_MEASURES = (
    "vulnerable_stage_extra_protection",
    "community_support_notification",
)


def stage_from_value(label: str) -> JourneyStage:
    if not isinstance(label, str) or not label:
        raise ValueError("stage must be a non-empty string")
    try:
        return JourneyStage(label.strip().lower())
    except ValueError:
        allowed = ", ".join(s.value for s in JourneyStage)
        raise ValueError(f"Unknown journey stage: {label}. Allowed: {allowed}") from None
