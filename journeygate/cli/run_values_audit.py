from __future__ import annotations

import argparse
import csv
from pathlib import Path

import numpy as np

from journeygate.core.domain.enums import Severity, ViolationKind
from journeygate.core.domain.models import LiberationValues
from journeygate.core.values.validator import validate

CSV_COLUMNS = (
    "creator_sovereignty",
    "anti_oppression_validation",
    "black_queer_empowerment",
    "community_protection",
    "cultural_authenticity",
)
_TRUE = {"1", "true", "yes", "y"}
_FALSE = {"0", "false", "no", "n"}


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Audit a CSV of liberation value vectors")
    parser.add_argument("--csv", required=True, help="CSV path with one value vector per row")
    parser.add_argument(
        "--max-critical-rate",
        type=float,
        default=0.2,
        help="Fail when the share of rows with a critical violation exceeds this rate",
    )
    parser.add_argument("--debug", action="store_true", help="Print per-row debug lines")
    return parser.parse_args()


def _parse_bool(raw: str, line_no: int) -> bool:
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"line {line_no}: anti_oppression_validation must be a boolean, got '{raw}'")


def read_values_csv(path: Path) -> list[LiberationValues]:
    rows: list[LiberationValues] = []
    with path.open(newline="", encoding="utf-8") as fh:
        reader = csv.DictReader(fh)
        missing = [c for c in CSV_COLUMNS if c not in (reader.fieldnames or [])]
        if missing:
            raise ValueError(f"CSV missing columns: {missing}")
        for line_no, row in enumerate(reader, start=2):
            try:
                payload = {
                    "creator_sovereignty": float(row["creator_sovereignty"]),
                    "anti_oppression_validation": _parse_bool(row["anti_oppression_validation"], line_no),
                    "black_queer_empowerment": float(row["black_queer_empowerment"]),
                    "community_protection": float(row["community_protection"]),
                    "cultural_authenticity": float(row["cultural_authenticity"]),
                }
                rows.append(LiberationValues.from_mapping(payload))
            except ValueError as exc:
                raise ValueError(f"line {line_no}: {exc}") from exc
    return rows


def summarize(values: list[LiberationValues]) -> dict[str, float]:
    results = [validate(v) for v in values]
    scores = np.asarray([r.empowerment_score for r in results], dtype=float)
    valid = np.asarray([r.is_valid for r in results], dtype=bool)
    critical = np.asarray([r.has_severity(Severity.CRITICAL) for r in results], dtype=bool)

    summary: dict[str, float] = {
        "rows": float(len(values)),
        "valid_rate": float(np.mean(valid)) if valid.size else 0.0,
        "critical_rate": float(np.mean(critical)) if critical.size else 0.0,
        "score_mean": float(np.mean(scores)) if scores.size else 0.0,
        "score_p50": float(np.percentile(scores, 50)) if scores.size else 0.0,
        "score_p90": float(np.percentile(scores, 90)) if scores.size else 0.0,
    }
    for kind in ViolationKind:
        failed = np.asarray([any(v.kind == kind for v in r.violations) for r in results], dtype=bool)
        summary[f"pass_rate_{kind.value}"] = float(1.0 - np.mean(failed)) if failed.size else 0.0
    return summary


def main() -> None:
    args = parse_args()
    try:
        values = read_values_csv(Path(args.csv))
    except (OSError, ValueError) as exc:
        print(f"SUMMARY status=ERROR message={exc}")
        raise SystemExit(2)

    if args.debug:
        for idx, row in enumerate(values):
            result = validate(row)
            print(f"[debug] row={idx} valid={result.is_valid} score={result.empowerment_score:.2f}")

    summary = summarize(values)
    for key, value in summary.items():
        if key == "rows":
            print(f"SUMMARY {key}={int(value)}")
        else:
            print(f"SUMMARY {key}={value:.4f}")

    if summary["critical_rate"] > args.max_critical_rate:
        print("OVERALL: FAIL")
        raise SystemExit(1)
    print("OVERALL: PASS")


if __name__ == "__main__":
    main()
