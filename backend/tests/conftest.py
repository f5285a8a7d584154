from __future__ import annotations

import pytest
from httpx import ASGITransport, AsyncClient
from starlette.testclient import TestClient

from app.core.dependencies import get_employee_service
from app.core.employee_store import InMemoryEmployeeStore
from app.main import app
from app.models.employee import Employee
from app.services.employee_service import EmployeeService

SAMPLE_EMPLOYEES: list[dict] = [
    {
        "id": "emp001",
        "firstName": "John",
        "lastName": "Doe",
        "email": "john.doe@company.com",
        "phone": "+1-555-0101",
        "department": "Engineering",
        "title": "Software Engineer",
        "location": "New York",
        "avatar": "https://randomuser.me/api/portraits/men/1.jpg",
        "dateOfBirth": "1990-01-15",
        "hireDate": "2020-03-01",
        "salary": 75000,
        "status": "active",
    },
    {
        "id": "emp002",
        "firstName": "Jane",
        "lastName": "Smith",
        "email": "jane.smith@company.com",
        "phone": "+1-555-0102",
        "department": "Marketing",
        "title": "Manager",
        "location": "San Francisco",
        "avatar": "https://randomuser.me/api/portraits/women/1.jpg",
        "dateOfBirth": "1988-05-22",
        "hireDate": "2019-07-15",
        "salary": 85000,
        "status": "active",
    },
    {
        "id": "emp003",
        "firstName": "Bob",
        "lastName": "Johnson",
        "email": "bob.johnson@company.com",
        "phone": "+1-555-0103",
        "department": "Engineering",
        "title": "Senior Developer",
        "location": "Remote",
        "avatar": "https://randomuser.me/api/portraits/men/2.jpg",
        "dateOfBirth": "1985-09-10",
        "hireDate": "2018-01-20",
        "salary": 95000,
        "status": "active",
    },
    {
        "id": "emp004",
        "firstName": "Alice",
        "lastName": "Brown",
        "email": "alice.brown@company.com",
        "phone": "+1-555-0104",
        "department": "HR",
        "title": "Manager",
        "location": "London",
        "avatar": "https://randomuser.me/api/portraits/women/2.jpg",
        "dateOfBirth": "1992-12-03",
        "hireDate": "2021-05-10",
        "salary": 70000,
        "status": "inactive",
    },
    {
        "id": "emp005",
        "firstName": "Charlie",
        "lastName": "Wilson",
        "email": "charlie.wilson@company.com",
        "phone": "+1-555-0105",
        "department": "Sales",
        "title": "Director",
        "location": "Berlin",
        "avatar": "https://randomuser.me/api/portraits/men/3.jpg",
        "dateOfBirth": "1983-04-18",
        "hireDate": "2017-11-30",
        "salary": 110000,
        "status": "active",
    },
]


@pytest.fixture(autouse=True)
def _seed_settings():
    from app.core.config import settings

    original = settings.SEED_ENABLED
    settings.SEED_ENABLED = False
    yield
    settings.SEED_ENABLED = original


@pytest.fixture
def sample_employees() -> list[Employee]:
    return [Employee.model_validate(doc) for doc in SAMPLE_EMPLOYEES]


@pytest.fixture
def service(sample_employees) -> EmployeeService:
    return EmployeeService(InMemoryEmployeeStore(sample_employees))


@pytest.fixture
def client(service):
    app.dependency_overrides[get_employee_service] = lambda: service
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
async def async_client(service):
    app.dependency_overrides[get_employee_service] = lambda: service
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def new_employee_payload() -> dict:
    return {
        "firstName": "Olivia",
        "lastName": "Taylor",
        "email": "Olivia.Taylor@Company.com",
        "phone": "+1-555-0106",
        "department": "Engineering",
        "title": "Director",
        "location": "New York",
        "dateOfBirth": "1985-07-12",
        "hireDate": "2016-09-01",
        "salary": 130000,
        "status": "active",
    }
