from __future__ import annotations

import pytest

from app.core.errors import ValidationFailure
from app.models.employee import EmployeeRecord
from app.services.derivation import max_salary, search_by_name, top_earners


def _record(name: str, salary: int) -> EmployeeRecord:
    return EmployeeRecord(id=name.lower(), name=name, salary=salary)


SAMPLE = [_record("Al", 100), _record("Bo", 300), _record("Cy", 300)]


def test_max_salary():
    assert max_salary(SAMPLE) == 300


def test_max_salary_empty_list_is_zero():
    assert max_salary([]) == 0


def test_top_earners_stable_on_ties():
    assert top_earners(SAMPLE, 2) == ["Bo", "Cy"]
    assert top_earners(SAMPLE) == ["Bo", "Cy", "Al"]


def test_top_earners_is_idempotent():
    assert top_earners(SAMPLE, 2) == top_earners(SAMPLE, 2)


def test_top_earners_limits_to_ten():
    records = [_record(f"E{i:02d}", i * 1000) for i in range(1, 16)]

    names = top_earners(records)

    assert len(names) == 10
    assert names[0] == "E15"
    assert names[-1] == "E06"


def test_top_earners_does_not_reorder_input():
    records = list(SAMPLE)
    top_earners(records)
    assert records == SAMPLE


def test_top_earners_empty():
    assert top_earners([]) == []


def test_search_is_case_insensitive_and_keeps_order():
    records = [_record("Jane Doe", 1), _record("John Smith", 2), _record("doe, John", 3)]

    result = search_by_name(records, "DOE")

    assert [r.name for r in result] == ["Jane Doe", "doe, John"]


def test_search_no_match_returns_empty():
    assert search_by_name(SAMPLE, "zed") == []


@pytest.mark.parametrize("fragment", [None, "", "   "])
def test_search_rejects_blank_fragment(fragment):
    with pytest.raises(ValidationFailure, match="Name fragment cannot be null or empty"):
        search_by_name(SAMPLE, fragment)
