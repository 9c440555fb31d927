"""Timeout and failure guard around the community-support oracle.

Responsibilities:
  - Bound each oracle call by a caller-supplied timeout.
  - Map timeouts and oracle errors to an unsupported (False) signal.

Invariants:
  - Never raises on oracle failure; progression evaluation stays a data outcome.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeoutError
from typing import Optional

from journeygate.core.domain.models import CommunityContext, ProgressionRule
from journeygate.core.ports.support_oracle_port import CommunitySupportOracle

logger = logging.getLogger(__name__)


class GuardedSupportOracle:
    def __init__(
        self,
        inner: CommunitySupportOracle,
        timeout_s: Optional[float] = None,
        max_workers: int = 4,
    ) -> None:
        if timeout_s is not None and timeout_s <= 0:
            raise ValueError("timeout_s must be > 0")
        self._inner = inner
        self._timeout_s = timeout_s
        self._executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="support-oracle")

    def is_supported(self, member_id: str, rule: ProgressionRule, context: CommunityContext) -> bool:
        future = self._executor.submit(self._inner.is_supported, member_id, rule, context)
        try:
            return bool(future.result(timeout=self._timeout_s))
        except FutureTimeoutError:
            future.cancel()
            logger.warning(
                "Community support oracle timed out after %ss for member=%s %s->%s",
                self._timeout_s,
                member_id,
                rule.from_stage.value,
                rule.to_stage.value,
            )
            return False
        except Exception:
            logger.warning(
                "Community support oracle failed for member=%s %s->%s",
                member_id,
                rule.from_stage.value,
                rule.to_stage.value,
                exc_info=True,
            )
            return False

    def close(self) -> None:
        self._executor.shutdown(wait=False, cancel_futures=True)
