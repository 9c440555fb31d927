from __future__ import annotations

import logging
from pathlib import Path

from journeygate.core.catalog.loader import load_community_rules
from journeygate.core.domain.models import CommunityInteractionRule

logger = logging.getLogger(__name__)


class JsonCommunityRuleSource:
    def __init__(self, path: Path) -> None:
        self._path = path

    def load(self) -> dict[str, list[CommunityInteractionRule]]:
        rules = load_community_rules(self._path)
        logger.info(
            "Loaded %d community rules for %d communities from %s",
            sum(len(r) for r in rules.values()),
            len(rules),
            self._path,
        )
        return rules
