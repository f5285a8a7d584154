from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status

from app.core.dependencies import get_employee_query, get_employee_service
from app.models.employee import (
    Employee,
    EmployeeCreate,
    EmployeeFilters,
    EmployeeListResponse,
    EmployeeQuery,
    EmployeeUpdate,
)
from app.services.employee_service import (
    DuplicateEmailError,
    EmployeeNotFoundError,
    EmployeeService,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/employees", tags=["employees"])


def _not_found(err: EmployeeNotFoundError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(err))


def _duplicate(err: DuplicateEmailError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(err))


@router.post("", response_model=Employee, status_code=status.HTTP_201_CREATED)
async def create_employee(
    data: EmployeeCreate,
    service: EmployeeService = Depends(get_employee_service),  # noqa: B008
):
    try:
        return await service.create(data)
    except DuplicateEmailError as err:
        logger.info("Rejected create: duplicate email")
        raise _duplicate(err) from err


@router.get("", response_model=EmployeeListResponse)
async def list_employees(
    query: EmployeeQuery = Depends(get_employee_query),  # noqa: B008
    service: EmployeeService = Depends(get_employee_service),  # noqa: B008
):
    try:
        page = await service.find_all(query)
    except Exception as err:
        logger.exception("Failed to list employees")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve employees",
        ) from err

    return EmployeeListResponse(
        employees=page.employees,
        total=page.total,
        page=page.page,
        limit=page.limit,
    )


@router.get("/filters", response_model=EmployeeFilters)
async def get_filters(
    service: EmployeeService = Depends(get_employee_service),  # noqa: B008
):
    return await service.get_filters()


@router.get("/{employee_id}", response_model=Employee)
async def get_employee(
    employee_id: str,
    service: EmployeeService = Depends(get_employee_service),  # noqa: B008
):
    try:
        return await service.find_one(employee_id)
    except EmployeeNotFoundError as err:
        raise _not_found(err) from err


@router.patch("/{employee_id}", response_model=Employee)
async def update_employee(
    employee_id: str,
    patch: EmployeeUpdate,
    service: EmployeeService = Depends(get_employee_service),  # noqa: B008
):
    try:
        return await service.update(employee_id, patch)
    except EmployeeNotFoundError as err:
        raise _not_found(err) from err
    except DuplicateEmailError as err:
        logger.info("Rejected update of %s: duplicate email", employee_id)
        raise _duplicate(err) from err


@router.delete("/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_employee(
    employee_id: str,
    service: EmployeeService = Depends(get_employee_service),  # noqa: B008
):
    try:
        await service.delete(employee_id)
    except EmployeeNotFoundError as err:
        raise _not_found(err) from err
    return Response(status_code=status.HTTP_204_NO_CONTENT)
