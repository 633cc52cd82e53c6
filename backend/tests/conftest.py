from __future__ import annotations

import pytest
from httpx import ASGITransport, AsyncClient
from starlette.testclient import TestClient

from app.main import app

UPSTREAM_EMPLOYEES = [
    {
        "id": "4a3a170b-22cd-4ac2-aad1-9bb5b34a1507",
        "employee_name": "Tiger Nixon",
        "employee_salary": 320800,
        "employee_age": 61,
        "employee_title": "Vice Chair Executive Principal Chief Response Strategist",
        "employee_email": "tnixon@company.com",
    },
    {
        "id": "5255f1a5-f9f7-4be5-829a-134bde088d17",
        "employee_name": "Bill Bob",
        "employee_salary": 89750,
        "employee_age": 24,
        "employee_title": "Documentation Engineer",
        "employee_email": "billBob@company.com",
    },
    {
        "id": "0c6a0e7b-7c4b-4c70-8d4b-4b1c5f2ab4f1",
        "employee_name": "Jill Jenkins",
        "employee_salary": 139082,
        "employee_age": 48,
        "employee_title": "Financial Advisor",
        "employee_email": "jillj@company.com",
    },
]


@pytest.fixture
def upstream_employees() -> list[dict]:
    return [dict(e) for e in UPSTREAM_EMPLOYEES]


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
async def async_client():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
