"""Error kinds raised by the employee client.

``TransportError`` and ``TransportResponseError`` come from bare calls.
``ClientDataError`` (4xx) and ``ServiceError`` (5xx) come from calls that
classify the response status.
"""

from __future__ import annotations


class EmployeeClientError(Exception):
    """Base class for every failure raised by the client."""


class TransportError(EmployeeClientError):
    """No response was obtained: DNS failure, refused connection or timeout."""

    def __init__(self, message: str, operation: str | None = None) -> None:
        super().__init__(message)
        self.operation = operation


class TransportResponseError(EmployeeClientError):
    """Non-2xx response on a call without status classification."""

    def __init__(self, status_code: int, body: str, operation: str | None = None) -> None:
        super().__init__(f"{status_code} - {body}")
        self.status_code = status_code
        self.body = body
        self.operation = operation


class ClientDataError(EmployeeClientError):
    """4xx response: the request must be corrected by the caller. Never retried."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ServiceError(EmployeeClientError):
    """5xx response: the service failed to handle a valid request."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
