from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from employee_client.core.retry import RetryPolicy
from employee_client.core.errors import ServiceError, TransportError, TransportResponseError
from employee_client.services.employee_client import EmployeeRestClient
from employee_client.services.request_executor import RequestExecutor

BASE_URL = "http://employee.test/employeeservice"


def make_response(status: int, body: str | bytes, charset: str | None = "utf-8") -> MagicMock:
    response = MagicMock()
    response.status = status
    response.charset = charset
    response.read = AsyncMock(return_value=body.encode() if isinstance(body, str) else body)
    return response


class FakeTransport:
    """Serves queued responses (or raises queued exceptions) to successive requests.

    The last queued outcome is repeated once the queue is down to one entry.
    """

    def __init__(self) -> None:
        self.outcomes: list[Any] = []
        self.calls: list[dict[str, Any]] = []
        self.session = MagicMock()
        self.session.request.side_effect = self._request

    def respond(self, status: int, body: str | bytes = "", charset: str | None = "utf-8") -> FakeTransport:
        self.outcomes.append(make_response(status, body, charset))
        return self

    def fail(self, error: BaseException) -> FakeTransport:
        self.outcomes.append(error)
        return self

    def _request(self, method: str, url: str, **kwargs: Any) -> AsyncMock:
        self.calls.append({"method": method, "url": url, **kwargs})
        outcome = self.outcomes.pop(0) if len(self.outcomes) > 1 else self.outcomes[0]

        request_context = AsyncMock()
        if isinstance(outcome, BaseException):
            request_context.__aenter__.side_effect = outcome
        else:
            request_context.__aenter__.return_value = outcome
        request_context.__aexit__.return_value = None
        return request_context


class RecordingSleep:
    def __init__(self) -> None:
        self.delays: list[float] = []

    async def __call__(self, seconds: float) -> None:
        self.delays.append(float(seconds))


@pytest.fixture
def fake_transport():
    transport = FakeTransport()

    client_session = AsyncMock()
    client_session.__aenter__.return_value = transport.session
    client_session.__aexit__.return_value = None

    with patch(
        "employee_client.services.request_executor.aiohttp.ClientSession",
        return_value=client_session,
    ) as session_cls:
        transport.session_cls = session_cls
        yield transport


@pytest.fixture
def recording_sleep():
    return RecordingSleep()


@pytest.fixture
def executor():
    return RequestExecutor(BASE_URL, timeout_seconds=5.0)


@pytest.fixture
def employee_client(executor, recording_sleep):
    return EmployeeRestClient(
        executor,
        transport_retry_policy=RetryPolicy(retry_on=(TransportError, TransportResponseError)),
        service_retry_policy=RetryPolicy(retry_on=(ServiceError,)),
        sleep=recording_sleep,
    )
