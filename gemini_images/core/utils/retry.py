"""Bounded exponential-backoff retries for remote calls.

Only transient failures (the service reporting overload/unavailability) are
retried. Everything else is re-raised on first occurrence, unchanged.

    attempt 0 fails (transient) -> wait initial_delay
    attempt 1 fails (transient) -> wait initial_delay * multiplier
    ...
    attempt max_retries fails (transient) -> RetryExhaustedError
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Awaitable, Callable, Optional, TypeVar

from gemini_images.core.exceptions import RetryExhaustedError

if TYPE_CHECKING:  # pragma: no cover - type checking only
    from gemini_images.core.pydantic_schemas import RetryPolicy

logger = logging.getLogger(__name__)

T = TypeVar("T")

TRANSIENT_STATUS_CODES = frozenset({503})
TRANSIENT_ERROR_MARKERS: tuple[str, ...] = ("503", "Service Unavailable", "overloaded")


def _status_code(exc: BaseException) -> Optional[int]:
    """Return a structured HTTP status carried by ``exc`` or its wrapped error."""

    candidates = [exc, getattr(exc, "original_error", None), exc.__cause__]
    for candidate in candidates:
        if candidate is None:
            continue
        for attr in ("code", "status_code"):
            value = getattr(candidate, attr, None)
            if isinstance(value, int) and not isinstance(value, bool):
                return value
    return None


def is_transient_error(exc: BaseException) -> bool:
    """Return ``True`` when ``exc`` signals that the service is busy."""

    status = _status_code(exc)
    if status is not None:
        return status in TRANSIENT_STATUS_CODES

    message = str(exc)
    return any(marker in message for marker in TRANSIENT_ERROR_MARKERS)


class RetryExecutor:
    """Run awaitables under a shared, immutable ``RetryPolicy``."""

    def __init__(
        self,
        policy: "RetryPolicy",
        *,
        sleep: Optional[Callable[[float], Awaitable[None]]] = None,
        classifier: Callable[[BaseException], bool] = is_transient_error,
    ) -> None:
        self.policy = policy
        self._sleep = sleep or asyncio.sleep
        self._is_transient = classifier

    async def execute(self, operation: Callable[[], Awaitable[T]], label: str) -> T:
        """Invoke ``operation`` until it succeeds, fails fatally or the budget runs out."""

        max_attempts = self.policy.max_attempts

        for attempt in range(max_attempts):
            try:
                return await operation()
            except Exception as exc:
                if not self._is_transient(exc):
                    raise

                if attempt == max_attempts - 1:
                    logger.error("%s: failed after %d attempts", label, max_attempts)
                    raise RetryExhaustedError(
                        f"Service overloaded after {max_attempts} attempts. "
                        "Please try again later or use a different model. "
                        f"Original error: {exc}",
                        attempts=max_attempts,
                        original_error=exc,
                        provider=getattr(exc, "provider", None),
                    ) from exc

                delay = self.policy.delay_for(attempt)
                logger.warning(
                    "%s: service overloaded (attempt %d/%d), retrying in %.1fs",
                    label,
                    attempt + 1,
                    max_attempts,
                    delay,
                )
                await self._sleep(delay)

        raise AssertionError("unreachable")  # pragma: no cover


__all__ = [
    "RetryExecutor",
    "TRANSIENT_ERROR_MARKERS",
    "TRANSIENT_STATUS_CODES",
    "is_transient_error",
]
