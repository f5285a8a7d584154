"""In-memory employee directory service."""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable
from urllib.parse import quote

from app.core.config import Settings
from app.core.employee_store import EmployeeStore, InMemoryEmployeeStore, generate_employee_id
from app.models.employee import (
    Employee,
    EmployeeCreate,
    EmployeeFilters,
    EmployeeQuery,
    EmployeeUpdate,
)
from app.services.employee_query import EmployeePage, execute_query, extract_filter_options
from app.services.seed_service import fetch_seed_employees

logger = logging.getLogger(__name__)

AVATAR_URL = "https://ui-avatars.com/api/?name={name}&background=6366f1&color=ffffff&size=200"


class EmployeeServiceError(Exception):
    pass


class EmployeeNotFoundError(EmployeeServiceError):
    def __init__(self, employee_id: str) -> None:
        self.employee_id = employee_id
        super().__init__(f"Employee with ID {employee_id} not found")


class DuplicateEmailError(EmployeeServiceError):
    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__("Employee with this email already exists")


def _normalize_email(email: str) -> str:
    return email.strip().lower()


def email_exists(records: Iterable[Employee], candidate_email: str, exclude_id: str | None = None) -> bool:
    candidate = _normalize_email(candidate_email)
    return any(
        _normalize_email(record.email) == candidate and record.id != exclude_id
        for record in records
    )


def default_avatar(first_name: str | None) -> str:
    return AVATAR_URL.format(name=quote(first_name or "Employee", safe=""))


class EmployeeService:
    def __init__(self, store: EmployeeStore | None = None) -> None:
        self.store: EmployeeStore = store if store is not None else InMemoryEmployeeStore()
        self.initialized: bool = False
        self._lock = threading.Lock()

    async def initialize(self, settings: Settings) -> None:
        if self.initialized:
            return
        self.initialized = True

        if not settings.SEED_ENABLED:
            logger.warning("Seeding disabled — starting with an empty directory")
            return

        try:
            employees = await fetch_seed_employees(settings)
        except Exception:
            logger.exception("Failed to load seed employees — starting with an empty directory")
            return

        with self._lock:
            self.store.load(employees)
        logger.info("EmployeeService initialized with %d employees", len(employees))

    async def close(self) -> None:
        with self._lock:
            self.store.clear()
        self.initialized = False

    def count(self) -> int:
        return len(self.store)

    async def find_all(self, query: EmployeeQuery) -> EmployeePage:
        return execute_query(self.store.all(), query)

    async def get_filters(self) -> EmployeeFilters:
        return extract_filter_options(self.store.all())

    async def find_one(self, employee_id: str) -> Employee:
        employee = self.store.find_by_id(employee_id)
        if employee is None:
            raise EmployeeNotFoundError(employee_id)
        return employee

    async def create(self, data: EmployeeCreate) -> Employee:
        with self._lock:
            if email_exists(self.store.all(), data.email):
                raise DuplicateEmailError(data.email)

            employee = Employee(
                id=generate_employee_id(),
                first_name=data.first_name or "",
                last_name=data.last_name or "",
                email=(data.email or "").strip(),
                phone=data.phone or "",
                department=data.department or "",
                title=data.title or "",
                location=data.location or "",
                date_of_birth=data.date_of_birth or "",
                hire_date=data.hire_date or "",
                salary=data.salary or 0,
                status=data.status or "active",
                avatar=data.avatar or default_avatar(data.first_name),
            )
            self.store.insert_front(employee)

        logger.info("Created employee %s", employee.id)
        return employee

    async def update(self, employee_id: str, patch: EmployeeUpdate) -> Employee:
        changes = patch.model_dump(exclude_unset=True, exclude_none=True)
        changes.pop("id", None)

        with self._lock:
            current = self.store.find_by_id(employee_id)
            if current is None:
                raise EmployeeNotFoundError(employee_id)

            if "email" in changes:
                changes["email"] = changes["email"].strip()
                if email_exists(self.store.all(), changes["email"], exclude_id=employee_id):
                    raise DuplicateEmailError(changes["email"])

            updated = current.model_copy(update=changes)
            self.store.replace(employee_id, updated)

        logger.info("Updated employee %s (%s)", employee_id, ", ".join(sorted(changes)) or "no changes")
        return updated

    async def delete(self, employee_id: str) -> None:
        with self._lock:
            if not self.store.remove_by_id(employee_id):
                raise EmployeeNotFoundError(employee_id)
        logger.info("Deleted employee %s", employee_id)


employee_service = EmployeeService()
