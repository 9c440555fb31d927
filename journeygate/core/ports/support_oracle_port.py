from __future__ import annotations

from typing import Protocol

from journeygate.core.domain.models import CommunityContext, ProgressionRule


class CommunitySupportOracle(Protocol):
    def is_supported(self, member_id: str, rule: ProgressionRule, context: CommunityContext) -> bool:
        ...
