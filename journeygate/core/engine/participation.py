from __future__ import annotations

from journeygate.core.domain.models import CommunityContext, LiberationValues, ParticipationResult
from journeygate.core.values.validator import validate

PARTICIPATION_SCORE_MIN = 0.6
LIBERATION_ALIGNMENT_MIN = 0.7

# Placeholder for the accessibility subsystem; the list is fixed for every request.
ACCESSIBILITY_MEASURES = (
    "screen_reader_support",
    "multiple_language_options",
    "flexible_participation_formats",
)


class ParticipationEvaluator:
    def evaluate(
        self,
        participant_id: str,
        participation_type: str,
        context: CommunityContext,
        values: LiberationValues,
    ) -> ParticipationResult:
        bq = values.black_queer_empowerment
        cp = values.community_protection
        ca = values.cultural_authenticity

        participation_score = bq * 0.4 + cp * 0.3 + ca * 0.3
        liberation_alignment = (bq + cp + ca) / 3

        return ParticipationResult(
            is_valid=(
                participation_score >= PARTICIPATION_SCORE_MIN
                and liberation_alignment >= LIBERATION_ALIGNMENT_MIN
                and validate(values).is_valid
            ),
            participation_score=participation_score,
            empowerment_level=participation_score * bq,
            accessibility_measures=list(ACCESSIBILITY_MEASURES),
            liberation_alignment=liberation_alignment,
        )
