from __future__ import annotations

from journeygate.core.domain.models import CommunityContext, ProgressionRule


class StaticSupportOracle:
    """Answers every community-support query with a fixed result."""

    def __init__(self, supported: bool = True) -> None:
        self._supported = supported

    def is_supported(self, member_id: str, rule: ProgressionRule, context: CommunityContext) -> bool:
        return self._supported
