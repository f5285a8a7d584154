"""Employee models for the in-memory employee directory."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, validate_email
from pydantic.alias_generators import to_camel

EmployeeStatus = Literal["active", "inactive"]


class SortField(str, Enum):
    FIRST_NAME = "firstName"
    LAST_NAME = "lastName"
    EMAIL = "email"
    DEPARTMENT = "department"
    TITLE = "title"
    HIRE_DATE = "hireDate"
    SALARY = "salary"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


def _check_email(value: str) -> str:
    # the address is kept as submitted, minus surrounding blanks
    value = value.strip()
    _, address = validate_email(value)
    if address.casefold() != value.casefold():
        raise ValueError("must be a bare email address without a display name")
    return value


def _check_iso_date(value: str) -> str:
    try:
        datetime.fromisoformat(value)
    except ValueError as err:
        raise ValueError("must be an ISO 8601 date string") from err
    return value


EmailAddress = Annotated[str, AfterValidator(_check_email)]
IsoDate = Annotated[str, AfterValidator(_check_iso_date)]
Salary = Union[
    Annotated[int, Field(ge=0, le=1_000_000)],
    Annotated[float, Field(ge=0, le=1_000_000)],
]


class CamelModel(BaseModel):
    """Snake_case attributes, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Employee(CamelModel):
    """A stored employee record."""

    id: str
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str = ""
    department: str = ""
    title: str = ""
    location: str = ""
    avatar: str = ""
    date_of_birth: str = ""
    hire_date: str = ""
    salary: Union[int, float] = 0
    status: EmployeeStatus = "active"


class EmployeeCreate(CamelModel):
    """Request body for creating an employee."""

    first_name: str = Field(..., min_length=2, max_length=50)
    last_name: str = Field(..., min_length=2, max_length=50)
    email: EmailAddress
    phone: str = Field(..., min_length=10, max_length=15)
    department: str = Field(..., min_length=2, max_length=50)
    title: str = Field(..., min_length=2, max_length=100)
    location: str = Field(..., min_length=2, max_length=100)
    avatar: str | None = None
    date_of_birth: IsoDate
    hire_date: IsoDate
    salary: Salary
    status: EmployeeStatus | None = None


class EmployeeUpdate(CamelModel):
    """Partial update body; only the fields sent are applied."""

    first_name: str | None = Field(default=None, min_length=2, max_length=50)
    last_name: str | None = Field(default=None, min_length=2, max_length=50)
    email: EmailAddress | None = None
    phone: str | None = Field(default=None, min_length=10, max_length=15)
    department: str | None = Field(default=None, min_length=2, max_length=50)
    title: str | None = Field(default=None, min_length=2, max_length=100)
    location: str | None = Field(default=None, min_length=2, max_length=100)
    avatar: str | None = None
    date_of_birth: IsoDate | None = None
    hire_date: IsoDate | None = None
    salary: Salary | None = None
    status: EmployeeStatus | None = None


class EmployeeQuery(BaseModel):
    """Search, filter, sort and pagination parameters for one list request.

    ``sort_by`` accepts any string so the query engine can be driven
    directly; names outside :class:`SortField` leave the order untouched.
    """

    search: str | None = None
    department: str | None = None
    title: str | None = None
    location: str | None = None
    status: EmployeeStatus | None = None
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1)
    sort_by: str | None = None
    sort_order: SortOrder = SortOrder.ASC


class EmployeeListResponse(BaseModel):
    employees: list[Employee]
    total: int
    page: int
    limit: int


class EmployeeFilters(BaseModel):
    """Distinct facet values currently present in the directory."""

    departments: list[str] = []
    titles: list[str] = []
    locations: list[str] = []
