"""Employee record exchanged with the employee service."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Employee(BaseModel):
    """One employee as the service sends and receives it.

    The service owns validation: a create request without ``firstName`` or
    ``lastName`` is rejected with a 4xx response, not here.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    id: int | None = None
    age: int | None = None
    first_name: str | None = Field(default=None, alias="firstName")
    last_name: str | None = Field(default=None, alias="lastName")
    gender: str | None = None
    role: str | None = None

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)
