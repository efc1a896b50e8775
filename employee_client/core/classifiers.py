"""Response classifiers: map a non-2xx response to the error to raise."""

from __future__ import annotations

import logging
from typing import Callable

from employee_client.core.errors import (
    ClientDataError,
    EmployeeClientError,
    ServiceError,
    TransportResponseError,
)

logger = logging.getLogger(__name__)

ResponseClassifier = Callable[[int, str, str], EmployeeClientError]


def raw_status_classifier(status_code: int, body: str, operation: str) -> EmployeeClientError:
    logger.error(
        "Error response code is %s and the response body is %s (%s)",
        status_code,
        body,
        operation,
    )
    return TransportResponseError(status_code, body, operation=operation)


def client_server_classifier(status_code: int, body: str, operation: str) -> EmployeeClientError:
    if 400 <= status_code < 500:
        logger.error("Error response code is %s and the message is %s (%s)", status_code, body, operation)
        return ClientDataError(body, status_code=status_code)
    if 500 <= status_code < 600:
        logger.error("Error response code is %s and the message is %s (%s)", status_code, body, operation)
        return ServiceError(body, status_code=status_code)
    return raw_status_classifier(status_code, body, operation)
