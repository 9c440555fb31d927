"""DTO definitions for app-level requests.

Responsibilities:
  - Define stable, typed request structures accepted by the facade and CLIs.
Must not:
  - Implement evaluation logic.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal, Mapping, Optional

from journeygate.core.domain.enums import JourneyStage, stage_from_value
from journeygate.core.domain.models import CommunityContext, LiberationValues

Operation = Literal["community_interaction", "journey_progression", "democratic_participation"]
OPERATIONS = ("community_interaction", "journey_progression", "democratic_participation")


def _str_field(payload: Mapping[str, Any], key: str, default: Optional[str] = None) -> str:
    value = payload.get(key, default)
    if value is None:
        raise ValueError(f"Missing required field '{key}' in request")
    if not isinstance(value, str):
        raise ValueError(f"Field '{key}' must be a string")
    return value


@dataclass(frozen=True)
class EvaluationRequest:
    operation: Operation
    member_id: str
    values: LiberationValues
    stage: Optional[JourneyStage] = None
    target_stage: Optional[JourneyStage] = None
    community_id: str = "default"
    interaction_type: str = "general"
    participation_type: str = "general"
    context: CommunityContext = field(default_factory=CommunityContext)

    def validate(self) -> None:
        if self.operation not in OPERATIONS:
            raise ValueError(f"Unknown operation: {self.operation}")

        if not self.member_id or not self.member_id.strip():
            raise ValueError("member_id must be non-empty")

        if self.operation == "community_interaction":
            if self.stage is None:
                raise ValueError("stage must be provided for operation 'community_interaction'")
            if not self.community_id.strip():
                raise ValueError("community_id must be non-empty")
        elif self.operation == "journey_progression":
            if self.stage is None or self.target_stage is None:
                raise ValueError(
                    "stage and target_stage must be provided for operation 'journey_progression'"
                )
        elif not self.participation_type.strip():
            raise ValueError("participation_type must be non-empty")

        self.context.validate()

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any]) -> "EvaluationRequest":
        if not isinstance(payload, Mapping):
            raise ValueError("request must be a JSON object")
        if "operation" not in payload:
            raise ValueError("Missing required field 'operation' in request")
        if "member_id" not in payload:
            raise ValueError("Missing required field 'member_id' in request")
        if "values" not in payload:
            raise ValueError("Missing required field 'values' in request")

        stage = payload.get("stage")
        target_stage = payload.get("target_stage")
        request = cls(
            operation=payload["operation"],
            member_id=_str_field(payload, "member_id"),
            values=LiberationValues.from_mapping(payload["values"]),
            stage=stage_from_value(stage) if stage is not None else None,
            target_stage=stage_from_value(target_stage) if target_stage is not None else None,
            community_id=_str_field(payload, "community_id", "default"),
            interaction_type=_str_field(payload, "interaction_type", "general"),
            participation_type=_str_field(payload, "participation_type", "general"),
            context=CommunityContext.from_mapping(payload.get("context")),
        )
        request.validate()
        return request
