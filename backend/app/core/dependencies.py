from __future__ import annotations

from fastapi import Query

from app.models.employee import EmployeeQuery, EmployeeStatus, SortField, SortOrder
from app.services.employee_service import EmployeeService, employee_service


def get_employee_service() -> EmployeeService:
    return employee_service


def get_employee_query(
    search: str | None = None,
    department: str | None = None,
    title: str | None = None,
    location: str | None = None,
    status: EmployeeStatus | None = None,
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1),
    sort_by: SortField | None = Query(None, alias="sortBy"),
    sort_order: SortOrder = Query(SortOrder.ASC, alias="sortOrder"),
) -> EmployeeQuery:
    return EmployeeQuery(
        search=search,
        department=department,
        title=title,
        location=location,
        status=status,
        page=page,
        limit=limit,
        sort_by=sort_by.value if sort_by else None,
        sort_order=sort_order,
    )
