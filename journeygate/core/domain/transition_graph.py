"""Canonical ordering of journey stages.

Responsibilities:
  - Define the canonical path and the next stage along it.

Invariants:
  - Ordering is informational only; whether a move is possible is decided by the
    progression catalog, not by this graph.
"""

from __future__ import annotations

from typing import Optional

from .enums import JourneyStage

CANONICAL_PATH: tuple[JourneyStage, ...] = (
    JourneyStage.CRISIS,
    JourneyStage.STABILIZATION,
    JourneyStage.GROWTH,
    JourneyStage.COMMUNITY_HEALING,
    JourneyStage.ADVOCACY,
)

STAGE_ORDER: dict[JourneyStage, int] = {stage: idx for idx, stage in enumerate(CANONICAL_PATH)}


def next_stage(stage: JourneyStage) -> Optional[JourneyStage]:
    idx = STAGE_ORDER[stage]
    if idx + 1 >= len(CANONICAL_PATH):
        return None
    return CANONICAL_PATH[idx + 1]
