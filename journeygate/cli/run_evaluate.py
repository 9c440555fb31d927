from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from journeygate.app_api.app_config import AppConfig, load_app_config
from journeygate.app_api.dto import EvaluationRequest
from journeygate.app_api.factories.build_app import build_journeygate_app
from journeygate.app_api.providers.json_rule_source import JsonCommunityRuleSource
from journeygate.app_api.providers.static_support_oracle import StaticSupportOracle
from journeygate.core.engine.progression import NoProgressionRule, set_progression_debug
from journeygate.core.engine.result import OperationResult


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Evaluate journey/protection/participation requests")
    parser.add_argument("--request", required=True, help="JSON file with one request object or a list")
    parser.add_argument("--config", default=None, help="App config JSON path")
    parser.add_argument("--rules", default=None, help="Community rules JSON path (overrides config)")
    parser.add_argument(
        "--support",
        choices=["yes", "no"],
        default=None,
        help="Fixed community-support answer (overrides config)",
    )
    parser.add_argument("--timeout", type=float, default=None, help="Support oracle timeout in seconds")
    parser.add_argument("--debug", action="store_true", help="Print debug lines")
    return parser.parse_args()


def _dbg(args: argparse.Namespace, msg: str) -> None:
    if args.debug:
        print(f"[debug] {msg}")


def _summary_line(result: OperationResult) -> str:
    data = result.data
    allowed = getattr(data, "allow", None)
    if allowed is None:
        allowed = getattr(data, "allowed", None)
    if allowed is None:
        allowed = getattr(data, "is_valid", None)
    return (
        "SUMMARY "
        f"success={result.success} allowed={allowed} "
        f"empowerment_score={result.validation.empowerment_score:.2f} "
        f"empowerment_impact={result.empowerment_impact:.2f} "
        f"community_benefit={result.community_benefit:.2f} "
        f"violations={len(result.violations)}"
    )


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING)

    try:
        config = load_app_config(Path(args.config)) if args.config else AppConfig()
        payload = json.loads(Path(args.request).read_text(encoding="utf-8"))
        items = payload if isinstance(payload, list) else [payload]
        requests = [EvaluationRequest.from_mapping(item) for item in items]
    except (OSError, ValueError) as exc:
        print(f"SUMMARY status=ERROR message={exc}")
        raise SystemExit(2)

    support_oracle = None
    if args.support is not None:
        support_oracle = StaticSupportOracle(args.support == "yes")
    rule_source = JsonCommunityRuleSource(Path(args.rules)) if args.rules else None
    if args.timeout is not None:
        config = AppConfig(
            support_timeout_s=args.timeout,
            community_rules_path=config.community_rules_path,
            default_support=config.default_support,
            debug=config.debug,
        )
    if args.debug or config.debug:
        set_progression_debug(lambda line: print(f"[debug] {line}"))

    try:
        app = build_journeygate_app(config=config, support_oracle=support_oracle, rule_source=rule_source)
    except ValueError as exc:
        print(f"SUMMARY status=ERROR message={exc}")
        raise SystemExit(2)

    with app:
        _dbg(args, f"requests={len(requests)} communities={app.catalog.community_ids()}")

        if len(requests) == 1:
            try:
                result = app.process_request(requests[0])
            except NoProgressionRule as exc:
                print(f"SUMMARY status=ERROR message={exc}")
                raise SystemExit(2)
            print(_summary_line(result))
            for violation in result.violations:
                print(f"VIOLATION kind={violation.kind.value} severity={violation.severity.value}")
            return

        batch = app.process_batch(requests)
        for result in batch.results:
            print(_summary_line(result))
        for error in batch.errors:
            print(f"ERROR index={error.index} operation={error.operation} message={error.message}")
        print(f"SUMMARY overall_liberation_score={batch.overall_liberation_score:.2f}")
        print(f"SUMMARY aggregate_empowerment={batch.aggregate_empowerment:.2f}")
        print(f"SUMMARY community_impact={batch.community_impact:.2f}")
        for line in batch.systemic_recommendations:
            print(f"RECOMMENDATION {line}")


if __name__ == "__main__":
    main()
