"""Employee models for the public API and the upstream employee service."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, StrictInt, StrictStr


class EmployeeRecord(BaseModel):
    """Employee as returned to API callers.

    Decoded strictly from upstream data; unknown upstream fields are kept as extras.
    """

    model_config = ConfigDict(extra="allow")

    id: StrictStr
    name: StrictStr
    salary: StrictInt
    age: StrictInt | None = None
    title: StrictStr | None = None
    email: StrictStr | None = None


class EmployeeInput(BaseModel):
    """Request body for employee creation.

    Fields are optional here so the ordered creation checks report the violation.
    """

    name: str | None = None
    salary: int | None = None
    age: int | None = None
    title: str | None = None

    def to_upstream(self) -> dict[str, object]:
        return {
            "name": self.name,
            "salary": self.salary,
            "age": self.age,
            "title": self.title,
        }
