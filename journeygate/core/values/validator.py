"""Liberation values validation.

Responsibilities:
  - Compare each of the five value dimensions against its fixed minimum.
  - Accumulate violations and the weighted empowerment score.

Inputs/Outputs:
  - Inputs: LiberationValues (member-submitted values or a rule's required values).
  - Outputs: ValidationResult; is_valid is False iff a critical violation exists.

Invariants:
  - Pure and deterministic; all five dimensions are evaluated on every call.
  - Weights sum to 1.0 when every dimension passes.
"""

from __future__ import annotations

from ..domain.enums import Severity, ViolationKind
from ..domain.models import LiberationValues, ValidationResult, Violation

MIN_CREATOR_SOVEREIGNTY = 0.75
MIN_BLACK_QUEER_EMPOWERMENT = 0.6
MIN_COMMUNITY_PROTECTION = 0.7
MIN_CULTURAL_AUTHENTICITY = 0.65

DIMENSION_WEIGHTS: dict[ViolationKind, float] = {
    ViolationKind.CREATOR_SOVEREIGNTY: 0.25,
    ViolationKind.ANTI_OPPRESSION: 0.25,
    ViolationKind.EMPOWERMENT: 0.2,
    ViolationKind.PROTECTION: 0.15,
    ViolationKind.AUTHENTICITY: 0.15,
}

REMEDIES: dict[ViolationKind, str] = {
    ViolationKind.CREATOR_SOVEREIGNTY: "Increase creator revenue share to meet liberation standards",
    ViolationKind.ANTI_OPPRESSION: "Enable anti-oppression validation for community protection",
    ViolationKind.EMPOWERMENT: "Enhance Black queer empowerment features and representation",
    ViolationKind.PROTECTION: "Strengthen community protection mechanisms",
    ViolationKind.AUTHENTICITY: "Improve cultural authenticity through community validation",
}

_missing = [kind for kind in ViolationKind if kind not in DIMENSION_WEIGHTS or kind not in REMEDIES]
if _missing:
    raise RuntimeError(f"Missing weight or remedy for: {[m.value for m in _missing]}")


def _num(value: float) -> str:
    # Whole numbers render without a trailing ".0".
    value = float(value)
    return str(int(value)) if value.is_integer() else repr(value)


def _pct(value: float) -> str:
    return f"{round(value * 100)}%"


def validate(values: LiberationValues) -> ValidationResult:
    violations: list[Violation] = []
    score = 0.0

    def fail(kind: ViolationKind, severity: Severity, description: str) -> None:
        violations.append(Violation(kind, severity, description, REMEDIES[kind]))

    if values.creator_sovereignty < MIN_CREATOR_SOVEREIGNTY:
        fail(
            ViolationKind.CREATOR_SOVEREIGNTY,
            Severity.CRITICAL,
            f"Creator sovereignty {_num(values.creator_sovereignty)} below required "
            f"{_pct(MIN_CREATOR_SOVEREIGNTY)} minimum",
        )
    else:
        score += DIMENSION_WEIGHTS[ViolationKind.CREATOR_SOVEREIGNTY]

    if not values.anti_oppression_validation:
        fail(ViolationKind.ANTI_OPPRESSION, Severity.CRITICAL, "Anti-oppression validation not enabled")
    else:
        score += DIMENSION_WEIGHTS[ViolationKind.ANTI_OPPRESSION]

    if values.black_queer_empowerment < MIN_BLACK_QUEER_EMPOWERMENT:
        fail(
            ViolationKind.EMPOWERMENT,
            Severity.MAJOR,
            f"Black queer empowerment score {_num(values.black_queer_empowerment)} below required "
            f"{_pct(MIN_BLACK_QUEER_EMPOWERMENT)} minimum",
        )
    else:
        score += DIMENSION_WEIGHTS[ViolationKind.EMPOWERMENT]

    if values.community_protection < MIN_COMMUNITY_PROTECTION:
        fail(
            ViolationKind.PROTECTION,
            Severity.MAJOR,
            f"Community protection score {_num(values.community_protection)} below required "
            f"{_pct(MIN_COMMUNITY_PROTECTION)} minimum",
        )
    else:
        score += DIMENSION_WEIGHTS[ViolationKind.PROTECTION]

    if values.cultural_authenticity < MIN_CULTURAL_AUTHENTICITY:
        fail(
            ViolationKind.AUTHENTICITY,
            Severity.MINOR,
            f"Cultural authenticity score {_num(values.cultural_authenticity)} below required "
            f"{_pct(MIN_CULTURAL_AUTHENTICITY)} minimum",
        )
    else:
        score += DIMENSION_WEIGHTS[ViolationKind.AUTHENTICITY]

    return ValidationResult(
        is_valid=not any(v.severity == Severity.CRITICAL for v in violations),
        violations=violations,
        empowerment_score=score,
        recommendations=[v.remedy for v in violations],
    )
