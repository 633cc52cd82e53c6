"""Employee facade over the upstream employee service (no local storage)."""

from __future__ import annotations

import logging

from app.core.config import Settings
from app.core.errors import NotFoundFailure, ServiceUnavailable, UpstreamError
from app.models.employee import EmployeeInput, EmployeeRecord
from app.services import derivation
from app.services.envelope import EnvelopeUnwrapper
from app.services.upstream_client import UpstreamClient, upstream_client
from app.services.validation import validate_employee_input

logger = logging.getLogger(__name__)


class EmployeeService:
    def __init__(
        self,
        client: UpstreamClient | None = None,
        unwrapper: EnvelopeUnwrapper | None = None,
    ) -> None:
        self.client = client if client is not None else upstream_client
        self.unwrapper = unwrapper if unwrapper is not None else EnvelopeUnwrapper()

    @property
    def initialized(self) -> bool:
        return self.client.initialized

    async def initialize(self, settings: Settings) -> None:
        await self.client.initialize(settings)

    async def close(self) -> None:
        await self.client.close()

    async def check_connection(self) -> bool:
        return await self.client.check_connection()

    async def get_all_employees(self) -> list[EmployeeRecord]:
        try:
            body = await self.client.request("GET")
            employees = self.unwrapper.unwrap_list(body)
        except UpstreamError as e:
            logger.error("Error retrieving employees: %s", e)
            raise ServiceUnavailable(f"Failed to retrieve employees: {e}") from e

        logger.info("Retrieved %d employees", len(employees))
        return employees

    async def search_by_name(self, fragment: str | None) -> list[EmployeeRecord]:
        derivation.require_fragment(fragment)
        employees = await self.get_all_employees()
        return derivation.search_by_name(employees, fragment)

    async def get_employee_by_id(self, employee_id: str) -> EmployeeRecord:
        try:
            body = await self.client.request("GET", employee_id)
            employee = self.unwrapper.unwrap_one(body)
        except Exception as e:
            logger.error("Error retrieving employee with ID %s: %s", employee_id, e)
            raise NotFoundFailure(f"Employee not found with ID: {employee_id}") from e

        logger.info("Retrieved employee with ID: %s", employee_id)
        return employee

    async def get_highest_salary(self) -> int:
        return derivation.max_salary(await self.get_all_employees())

    async def get_top_ten_highest_earning_employee_names(self) -> list[str]:
        return derivation.top_earners(await self.get_all_employees(), derivation.TOP_EARNERS_LIMIT)

    async def create_employee(self, employee_input: EmployeeInput | None) -> EmployeeRecord:
        validate_employee_input(employee_input)

        try:
            body = await self.client.request("POST", json=employee_input.to_upstream())
            created = self.unwrapper.unwrap_one(body)
        except UpstreamError as e:
            logger.error("Error creating employee: %s", e)
            raise ServiceUnavailable(f"Failed to create employee: {e}") from e

        logger.info("Created employee: %s", created.name)
        return created

    async def delete_employee_by_id(self, employee_id: str) -> str:
        try:
            await self.client.request("DELETE", employee_id)
        except Exception as e:
            logger.error("Error deleting employee %s: %s", employee_id, e)
            raise NotFoundFailure(f"Employee not found: {employee_id}") from e

        logger.info("Deleted employee: %s", employee_id)
        return employee_id


employee_service = EmployeeService()
