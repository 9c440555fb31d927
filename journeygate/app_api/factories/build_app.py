"""Construct a fully wired app instance for running the evaluators.

Responsibilities:
  - Assemble the rule catalog, support oracle and engines based on config.
Must not:
  - Implement evaluation logic; composition only.
"""

from __future__ import annotations

from typing import Optional

from journeygate.app_api.app_config import AppConfig
from journeygate.app_api.facade import JourneyGateApplication
from journeygate.app_api.ports import CommunityRuleSource, CommunitySupportOracle
from journeygate.app_api.providers.guarded_support_oracle import GuardedSupportOracle
from journeygate.app_api.providers.json_rule_source import JsonCommunityRuleSource
from journeygate.app_api.providers.static_support_oracle import StaticSupportOracle
from journeygate.core.catalog.rule_catalog import build_default_catalog
from journeygate.core.engine.participation import ParticipationEvaluator
from journeygate.core.engine.progression import ProgressionEngine
from journeygate.core.engine.protection import ProtectionEngine


def build_journeygate_app(
    config: Optional[AppConfig] = None,
    support_oracle: Optional[CommunitySupportOracle] = None,
    rule_source: Optional[CommunityRuleSource] = None,
) -> JourneyGateApplication:
    """
    Composition root: build the catalogs once, wrap the support oracle with the
    configured timeout, and return the application facade. Callers own the
    returned app and must close() it to release the oracle worker pool.
    """
    config = config or AppConfig()

    if rule_source is None and config.community_rules_path is not None:
        rule_source = JsonCommunityRuleSource(config.community_rules_path)
    extra_rules = rule_source.load() if rule_source is not None else None
    catalog = build_default_catalog(extra_rules)

    if support_oracle is None:
        support_oracle = StaticSupportOracle(config.default_support)
    guarded = GuardedSupportOracle(support_oracle, timeout_s=config.support_timeout_s)

    return JourneyGateApplication(
        catalog=catalog,
        protection_engine=ProtectionEngine(catalog),
        progression_engine=ProgressionEngine(catalog, guarded),
        participation_evaluator=ParticipationEvaluator(),
        support_oracle=guarded,
    )
