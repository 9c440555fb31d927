"""Result envelopes returned by the app facade.

Responsibilities:
  - Wrap an engine result with its values validation and impact metrics.
  - Aggregate batch runs.

Inputs/Outputs:
  - Inputs: produced by JourneyGateApplication operations.
  - Outputs: dataclasses consumed by CLIs and orchestration layers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, TypeVar

from ..domain.models import ValidationResult, Violation

T = TypeVar("T")


@dataclass
class OperationResult(Generic[T]):
    success: bool
    data: T
    validation: ValidationResult
    empowerment_impact: float
    community_benefit: float
    sovereignty_compliance: bool
    recommendations: list[str]
    violations: list[Violation]


@dataclass
class BatchError:
    index: int
    operation: str
    message: str


@dataclass
class BatchResult:
    results: list[OperationResult]
    overall_liberation_score: float
    aggregate_empowerment: float
    community_impact: float
    systemic_recommendations: list[str]
    errors: list[BatchError] = field(default_factory=list)
