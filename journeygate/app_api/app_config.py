from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

DEFAULT_SUPPORT_TIMEOUT_S = 2.0


@dataclass(frozen=True)
class AppConfig:
    support_timeout_s: float = DEFAULT_SUPPORT_TIMEOUT_S
    community_rules_path: Optional[Path] = None
    default_support: bool = True
    debug: bool = False


def _optional(payload: dict[str, Any], key: str, expected_type: type, default: Any) -> Any:
    if key not in payload or payload[key] is None:
        return default
    value = payload[key]
    if expected_type is float:
        if not isinstance(value, (int, float)) or isinstance(value, bool):
            raise ValueError(f"Field '{key}' must be float")
        return float(value)
    if not isinstance(value, expected_type):
        raise ValueError(f"Field '{key}' must be {expected_type.__name__}")
    return value


def load_app_config(path: Path) -> AppConfig:
    if not path.exists():
        raise ValueError(f"Config file not found: {path}")

    payload = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(payload, dict):
        raise ValueError("Config must be a JSON object")

    known = {"support_timeout_s", "community_rules_path", "default_support", "debug"}
    unknown = sorted(set(payload.keys()) - known)
    if unknown:
        raise ValueError(f"Unknown config fields: {unknown}")

    timeout = _optional(payload, "support_timeout_s", float, DEFAULT_SUPPORT_TIMEOUT_S)
    if timeout <= 0.0:
        raise ValueError("Field 'support_timeout_s' must be > 0")

    rules_path: Optional[Path] = None
    raw_rules_path = _optional(payload, "community_rules_path", str, None)
    if raw_rules_path is not None:
        rules_path = Path(raw_rules_path)
        if not rules_path.is_absolute():
            rules_path = path.resolve().parent / rules_path

    return AppConfig(
        support_timeout_s=timeout,
        community_rules_path=rules_path,
        default_support=_optional(payload, "default_support", bool, True),
        debug=_optional(payload, "debug", bool, False),
    )
