"""Port definitions for app-level dependencies.

Responsibilities:
  - Define interface contracts for rule sources and the community-support oracle.
Must not:
  - Implement logic; interfaces only.
"""

from __future__ import annotations

from typing import Mapping, Protocol, Sequence

from journeygate.core.domain.models import CommunityInteractionRule
from journeygate.core.ports.support_oracle_port import CommunitySupportOracle


class CommunityRuleSource(Protocol):
    def load(self) -> Mapping[str, Sequence[CommunityInteractionRule]]:
        ...


__all__ = ["CommunityRuleSource", "CommunitySupportOracle"]
