from __future__ import annotations

from app.core.errors import ValidationFailure
from app.models.employee import EmployeeRecord

TOP_EARNERS_LIMIT = 10


def require_fragment(fragment: str | None) -> str:
    if fragment is None or not fragment.strip():
        raise ValidationFailure("Name fragment cannot be null or empty")
    return fragment


def search_by_name(records: list[EmployeeRecord], fragment: str | None) -> list[EmployeeRecord]:
    needle = require_fragment(fragment).lower()
    return [r for r in records if needle in r.name.lower()]


def max_salary(records: list[EmployeeRecord]) -> int:
    return max((r.salary for r in records), default=0)


def top_earners(records: list[EmployeeRecord], n: int = TOP_EARNERS_LIMIT) -> list[str]:
    # sorted() is stable, so equal salaries keep upstream order
    ranked = sorted(records, key=lambda r: r.salary, reverse=True)
    return [r.name for r in ranked[:n]]
