from __future__ import annotations

from fastapi import APIRouter, Body

from app.models.employee import EmployeeInput, EmployeeRecord
from app.services.employee_service import employee_service

router = APIRouter(prefix="/employee", tags=["employee"])


@router.get("", response_model=list[EmployeeRecord])
async def get_all_employees():
    return await employee_service.get_all_employees()


# Fixed paths are registered before "/{employee_id}" so they are not captured as ids.
@router.get("/search/", response_model=list[EmployeeRecord])
async def get_employees_by_empty_name_search():
    return await employee_service.search_by_name("")


@router.get("/search/{search_string}", response_model=list[EmployeeRecord])
async def get_employees_by_name_search(search_string: str):
    return await employee_service.search_by_name(search_string)


@router.get("/highestSalary", response_model=int)
async def get_highest_salary_of_employees():
    return await employee_service.get_highest_salary()


@router.get("/topTenHighestEarningEmployeeNames", response_model=list[str])
async def get_top_ten_highest_earning_employee_names():
    return await employee_service.get_top_ten_highest_earning_employee_names()


@router.get("/{employee_id}", response_model=EmployeeRecord)
async def get_employee_by_id(employee_id: str):
    return await employee_service.get_employee_by_id(employee_id)


@router.post("", response_model=EmployeeRecord)
async def create_employee(employee_input: EmployeeInput | None = Body(default=None)):  # noqa: B008
    return await employee_service.create_employee(employee_input)


@router.delete("/{employee_id}", response_model=str)
async def delete_employee_by_id(employee_id: str):
    return await employee_service.delete_employee_by_id(employee_id)
