"""Unwrap the upstream ``{"data": ..., "status": ...}`` envelope into employee records."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from pydantic import ValidationError

from app.core.errors import DecodeFailure
from app.models.employee import EmployeeRecord

logger = logging.getLogger(__name__)

# Upstream field names → public attribute names
_FIELD_MAP: list[tuple[str, str]] = [
    ("name", "employee_name"),
    ("salary", "employee_salary"),
    ("age", "employee_age"),
    ("title", "employee_title"),
    ("email", "employee_email"),
]


def decode_employee(raw: Any) -> EmployeeRecord:
    """Decode one upstream employee object, failing closed on any shape mismatch."""
    if not isinstance(raw, Mapping):
        raise DecodeFailure(f"Expected an employee object, got {type(raw).__name__}")

    data: dict[str, Any] = dict(raw)
    for public_key, upstream_key in _FIELD_MAP:
        if upstream_key in data:
            data[public_key] = data.pop(upstream_key)

    try:
        return EmployeeRecord.model_validate(data)
    except ValidationError as e:
        raise DecodeFailure(f"Malformed employee object: {e.error_count()} invalid field(s)") from e


class EnvelopeUnwrapper:
    def __init__(self, decode: Callable[[Any], EmployeeRecord] = decode_employee) -> None:
        self.decode = decode

    def _data(self, body: Any) -> Any:
        if not isinstance(body, Mapping):
            raise DecodeFailure("Upstream response is not a JSON object")
        data = body.get("data")
        if data is None:
            raise DecodeFailure("Upstream response has no 'data' field")
        return data

    def unwrap_list(self, body: Any) -> list[EmployeeRecord]:
        data = self._data(body)
        if not isinstance(data, list):
            raise DecodeFailure("Upstream 'data' field is not a list")
        return [self.decode(item) for item in data]

    def unwrap_one(self, body: Any) -> EmployeeRecord:
        data = self._data(body)
        if isinstance(data, list):
            raise DecodeFailure("Upstream 'data' field is a list, expected an object")
        return self.decode(data)
