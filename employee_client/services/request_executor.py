from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable, TypeVar

import aiohttp
from pydantic import TypeAdapter

from employee_client.core.classifiers import ResponseClassifier, raw_status_classifier
from employee_client.core.config import Settings
from employee_client.core.errors import TransportError, TransportResponseError
from employee_client.models.employee import Employee

logger = logging.getLogger(__name__)

T = TypeVar("T")

_EMPLOYEE_LIST = TypeAdapter(list[Employee])


def decode_employee(body: str) -> Employee:
    return Employee.model_validate_json(body)


def decode_employee_list(body: str) -> list[Employee]:
    if not body.strip():
        return []
    return _EMPLOYEE_LIST.validate_json(body)


def decode_text(body: str) -> str:
    return body


def _body_text(raw: bytes, charset: str | None) -> str:
    # invalid bytes are replaced so the status is still classified
    try:
        return raw.decode(charset or "utf-8", errors="replace")
    except LookupError:
        return raw.decode("utf-8", errors="replace")


class RequestExecutor:
    """Sends one request to the employee service and waits for the full response."""

    def __init__(self, base_url: str, timeout_seconds: float = 30.0) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds

    @classmethod
    def from_settings(cls, settings: Settings) -> RequestExecutor:
        return cls(
            base_url=settings.EMPLOYEE_SERVICE_BASE_URL,
            timeout_seconds=settings.EMPLOYEE_SERVICE_TIMEOUT_SECONDS,
        )

    async def execute(
        self,
        method: str,
        path: str,
        *,
        operation: str,
        decode: Callable[[str], T],
        params: dict[str, str] | None = None,
        body: Employee | None = None,
        classifier: ResponseClassifier = raw_status_classifier,
    ) -> T:
        url = f"{self.base_url}{path}"
        payload: dict[str, Any] | None = body.to_payload() if body is not None else None
        logger.debug("%s %s params=%s (%s)", method, url, params, operation)

        try:
            timeout = aiohttp.ClientTimeout(total=self.timeout_seconds)
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.request(method, url, params=params, json=payload) as response:
                    status = response.status
                    text = _body_text(await response.read(), response.charset)
        except (aiohttp.ClientError, asyncio.TimeoutError) as err:
            logger.error("Transport failure in %s for %s %s: %r", operation, method, url, err)
            raise TransportError(f"{method} {url} failed: {err!r}", operation=operation) from err

        if not 200 <= status < 300:
            raise classifier(status, text, operation)

        try:
            return decode(text)
        except ValueError as err:
            logger.error("Could not decode response of %s (%s): %s", operation, status, text)
            raise TransportResponseError(status, text, operation=operation) from err
