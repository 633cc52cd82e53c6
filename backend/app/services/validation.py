from __future__ import annotations

from app.core.errors import ValidationFailure
from app.models.employee import EmployeeInput

MIN_AGE = 16
MAX_AGE = 75


def validate_employee_input(candidate: EmployeeInput | None) -> None:
    """Raise ValidationFailure for the first violated creation constraint."""
    if candidate is None:
        raise ValidationFailure("Employee cannot be null")

    if candidate.name is None or not candidate.name.strip():
        raise ValidationFailure("Employee name is required")

    if candidate.salary is None or candidate.salary <= 0:
        raise ValidationFailure("Salary must be greater than zero")

    if candidate.age is None or not MIN_AGE <= candidate.age <= MAX_AGE:
        raise ValidationFailure(f"Age must be between {MIN_AGE} and {MAX_AGE}")

    if candidate.title is None or not candidate.title.strip():
        raise ValidationFailure("Employee title is required")
