"""Employee service client with status classification and retry per call."""

from __future__ import annotations

import asyncio
import logging
from typing import Callable, TypeVar

from employee_client.core.classifiers import (
    ResponseClassifier,
    client_server_classifier,
    raw_status_classifier,
)
from employee_client.core.config import Settings
from employee_client.core.endpoints import (
    ADD_NEW_EMPLOYEE_V1,
    ERROR_EMPLOYEE_V1,
    GET_ALL_EMPLOYEES_V1,
    GET_EMPLOYEE_BY_NAME_V1,
    employee_by_id_path,
    employee_name_params,
)
from employee_client.core.errors import (
    EmployeeClientError,
    ServiceError,
    TransportError,
    TransportResponseError,
)
from employee_client.core.retry import (
    SERVICE_RETRY_POLICY,
    TRANSPORT_RETRY_POLICY,
    RetryPolicy,
    SleepFunc,
)
from employee_client.models.employee import Employee
from employee_client.services.request_executor import (
    RequestExecutor,
    decode_employee,
    decode_employee_list,
    decode_text,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class EmployeeRestClient:
    """Async client for the employee service.

    Every operation goes through ``_call``, where the response classifier and
    the retry policy are chosen independently. Bare variants raise
    ``TransportResponseError`` for any non-2xx status; ``custom_error_handling``
    variants raise ``ClientDataError`` for 4xx and ``ServiceError`` for 5xx.
    """

    def __init__(
        self,
        executor: RequestExecutor,
        transport_retry_policy: RetryPolicy = TRANSPORT_RETRY_POLICY,
        service_retry_policy: RetryPolicy = SERVICE_RETRY_POLICY,
        sleep: SleepFunc | None = None,
    ) -> None:
        self.executor = executor
        self.transport_retry_policy = transport_retry_policy
        self.service_retry_policy = service_retry_policy
        self._sleep = sleep

    async def retrieve_all_employees(self) -> list[Employee]:
        return await self._call(
            "retrieve_all_employees",
            "GET",
            GET_ALL_EMPLOYEES_V1,
            decode=decode_employee_list,
        )

    async def retrieve_employee_by_id(self, employee_id: int) -> Employee:
        return await self._call(
            "retrieve_employee_by_id",
            "GET",
            employee_by_id_path(employee_id),
            decode=decode_employee,
        )

    async def retrieve_employee_by_id_custom_error_handling(self, employee_id: int) -> Employee:
        return await self._call(
            "retrieve_employee_by_id_custom_error_handling",
            "GET",
            employee_by_id_path(employee_id),
            decode=decode_employee,
            classifier=client_server_classifier,
        )

    async def retrieve_employee_by_id_with_retry(self, employee_id: int) -> Employee:
        return await self._call(
            "retrieve_employee_by_id_with_retry",
            "GET",
            employee_by_id_path(employee_id),
            decode=decode_employee,
            retry_policy=self.transport_retry_policy,
        )

    async def retrieve_employee_by_name(self, employee_name: str) -> list[Employee]:
        return await self._call(
            "retrieve_employee_by_name",
            "GET",
            GET_EMPLOYEE_BY_NAME_V1,
            decode=decode_employee_list,
            params=employee_name_params(employee_name),
        )

    async def add_new_employee(self, employee: Employee) -> Employee:
        return await self._call(
            "add_new_employee",
            "POST",
            ADD_NEW_EMPLOYEE_V1,
            decode=decode_employee,
            body=employee,
        )

    async def add_new_employee_custom_error_handling(self, employee: Employee) -> Employee:
        return await self._call(
            "add_new_employee_custom_error_handling",
            "POST",
            ADD_NEW_EMPLOYEE_V1,
            decode=decode_employee,
            body=employee,
            classifier=client_server_classifier,
        )

    async def update_employee(self, employee_id: int, employee: Employee) -> Employee:
        return await self._call(
            "update_employee",
            "PUT",
            employee_by_id_path(employee_id),
            decode=decode_employee,
            body=employee,
        )

    async def delete_employee_by_id(self, employee_id: int) -> str:
        return await self._call(
            "delete_employee_by_id",
            "DELETE",
            employee_by_id_path(employee_id),
            decode=decode_text,
        )

    async def error_endpoint(self) -> str:
        # Only 5xx is retried here; a 4xx from the same endpoint fails on the first attempt.
        return await self._call(
            "error_endpoint",
            "GET",
            ERROR_EMPLOYEE_V1,
            decode=decode_text,
            classifier=client_server_classifier,
            retry_policy=self.service_retry_policy,
        )

    async def _call(
        self,
        operation: str,
        method: str,
        path: str,
        *,
        decode: Callable[[str], T],
        params: dict[str, str] | None = None,
        body: Employee | None = None,
        classifier: ResponseClassifier = raw_status_classifier,
        retry_policy: RetryPolicy | None = None,
    ) -> T:
        async def _attempt() -> T:
            return await self.executor.execute(
                method,
                path,
                operation=operation,
                decode=decode,
                params=params,
                body=body,
                classifier=classifier,
            )

        try:
            if retry_policy is None:
                return await _attempt()

            async for attempt in retry_policy.retrying(operation, sleep=self._sleep):
                with attempt:
                    result = await _attempt()
            return result
        except EmployeeClientError as err:
            logger.error("%s in %s: %s", type(err).__name__, operation, err)
            raise


def create_employee_client(settings: Settings, sleep: SleepFunc | None = None) -> EmployeeRestClient:
    return EmployeeRestClient(
        RequestExecutor.from_settings(settings),
        transport_retry_policy=RetryPolicy.from_settings(settings, (TransportError, TransportResponseError)),
        service_retry_policy=RetryPolicy.from_settings(settings, (ServiceError,)),
        sleep=sleep,
    )


class BlockingEmployeeRestClient:
    """Blocking wrapper: each call runs the async operation to completion.

    Must not be used from inside a running event loop.
    """

    def __init__(self, client: EmployeeRestClient) -> None:
        self.client = client

    @classmethod
    def from_settings(cls, settings: Settings) -> BlockingEmployeeRestClient:
        return cls(create_employee_client(settings))

    def retrieve_all_employees(self) -> list[Employee]:
        return asyncio.run(self.client.retrieve_all_employees())

    def retrieve_employee_by_id(self, employee_id: int) -> Employee:
        return asyncio.run(self.client.retrieve_employee_by_id(employee_id))

    def retrieve_employee_by_id_custom_error_handling(self, employee_id: int) -> Employee:
        return asyncio.run(self.client.retrieve_employee_by_id_custom_error_handling(employee_id))

    def retrieve_employee_by_id_with_retry(self, employee_id: int) -> Employee:
        return asyncio.run(self.client.retrieve_employee_by_id_with_retry(employee_id))

    def retrieve_employee_by_name(self, employee_name: str) -> list[Employee]:
        return asyncio.run(self.client.retrieve_employee_by_name(employee_name))

    def add_new_employee(self, employee: Employee) -> Employee:
        return asyncio.run(self.client.add_new_employee(employee))

    def add_new_employee_custom_error_handling(self, employee: Employee) -> Employee:
        return asyncio.run(self.client.add_new_employee_custom_error_handling(employee))

    def update_employee(self, employee_id: int, employee: Employee) -> Employee:
        return asyncio.run(self.client.update_employee(employee_id, employee))

    def delete_employee_by_id(self, employee_id: int) -> str:
        return asyncio.run(self.client.delete_employee_by_id(employee_id))

    def error_endpoint(self) -> str:
        return asyncio.run(self.client.error_endpoint())
