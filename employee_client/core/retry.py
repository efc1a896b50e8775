"""Fixed-backoff retry policies for employee service calls."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable

from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception_type,
    stop_after_attempt,
    stop_after_delay,
    wait_fixed,
)

from employee_client.core.config import Settings
from employee_client.core.errors import ServiceError, TransportError, TransportResponseError

logger = logging.getLogger(__name__)

SleepFunc = Callable[[float], Awaitable[None]]


@dataclass(frozen=True)
class RetryPolicy:
    """Retry ``max_retries`` times after the first attempt, ``backoff_seconds`` apart.

    Only errors that are instances of ``retry_on`` are retried; anything else
    propagates after the first attempt. When retries run out the last error is
    re-raised as is.
    """

    retry_on: tuple[type[BaseException], ...]
    max_retries: int = 3
    backoff_seconds: float = 2.0
    deadline_seconds: float | None = None

    @property
    def attempts(self) -> int:
        return self.max_retries + 1

    @classmethod
    def from_settings(cls, settings: Settings, retry_on: tuple[type[BaseException], ...]) -> RetryPolicy:
        return cls(
            retry_on=retry_on,
            max_retries=settings.EMPLOYEE_RETRY_MAX_ATTEMPTS,
            backoff_seconds=settings.EMPLOYEE_RETRY_BACKOFF_SECONDS,
            deadline_seconds=settings.EMPLOYEE_RETRY_DEADLINE_SECONDS,
        )

    def retrying(self, operation: str, sleep: SleepFunc | None = None) -> AsyncRetrying:
        stop = stop_after_attempt(self.attempts)
        if self.deadline_seconds is not None:
            stop = stop | stop_after_delay(self.deadline_seconds)

        kwargs: dict[str, Any] = {
            "stop": stop,
            "wait": wait_fixed(self.backoff_seconds),
            "retry": retry_if_exception_type(self.retry_on),
            "before_sleep": _log_retry(operation, self.attempts),
            "reraise": True,
        }
        if sleep is not None:
            kwargs["sleep"] = sleep
        return AsyncRetrying(**kwargs)


def _log_retry(operation: str, attempts: int) -> Callable[[RetryCallState], None]:
    def _before_sleep(retry_state: RetryCallState) -> None:
        error = retry_state.outcome.exception() if retry_state.outcome else None
        delay = retry_state.next_action.sleep if retry_state.next_action else 0.0
        logger.warning(
            "Retrying %s after attempt %d/%d failed with %r; next attempt in %.1fs",
            operation,
            retry_state.attempt_number,
            attempts,
            error,
            delay,
        )

    return _before_sleep


TRANSPORT_RETRY_POLICY = RetryPolicy(retry_on=(TransportError, TransportResponseError))
SERVICE_RETRY_POLICY = RetryPolicy(retry_on=(ServiceError,))
