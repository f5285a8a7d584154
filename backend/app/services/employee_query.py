"""Search, filter, sort and paginate employee records."""

from __future__ import annotations

import unicodedata
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from typing import Any

from app.models.employee import Employee, EmployeeFilters, EmployeeQuery, SortField, SortOrder


@dataclass(frozen=True)
class EmployeePage:
    employees: list[Employee]
    total: int
    page: int
    limit: int


def collation_key(value: str) -> tuple[str, str]:
    """Sort key approximating locale-aware comparison.

    Accents and case only decide order between otherwise equal strings,
    so "émile" sorts with "emile" and "bob" before "Carl". Between
    strings that differ only in case the lowercase form comes first.
    """
    decomposed = unicodedata.normalize("NFKD", value)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return base.casefold(), value.swapcase()


def _text_key(attribute: str) -> Callable[[Employee], Any]:
    def key(record: Employee) -> tuple[str, str]:
        return collation_key(getattr(record, attribute))

    return key


SORT_KEYS: dict[str, Callable[[Employee], Any]] = {
    SortField.FIRST_NAME.value: _text_key("first_name"),
    SortField.LAST_NAME.value: _text_key("last_name"),
    SortField.EMAIL.value: _text_key("email"),
    SortField.DEPARTMENT.value: _text_key("department"),
    SortField.TITLE.value: _text_key("title"),
    SortField.HIRE_DATE.value: _text_key("hire_date"),
    SortField.SALARY.value: lambda record: record.salary,
}


def _matches_search(record: Employee, term: str) -> bool:
    first = record.first_name.lower()
    last = record.last_name.lower()
    return (
        term in first
        or term in last
        or term in record.email.lower()
        or term in f"{first} {last}"
    )


def filter_employees(records: Iterable[Employee], query: EmployeeQuery) -> list[Employee]:
    filtered = list(records)

    term = (query.search or "").strip().lower()
    if term:
        filtered = [r for r in filtered if _matches_search(r, term)]

    if query.department:
        filtered = [r for r in filtered if r.department == query.department]
    if query.title:
        filtered = [r for r in filtered if r.title == query.title]
    if query.location:
        filtered = [r for r in filtered if r.location == query.location]
    if query.status:
        filtered = [r for r in filtered if r.status == query.status]

    return filtered


def sort_employees(
    records: list[Employee],
    sort_by: str | None,
    sort_order: SortOrder | str = SortOrder.ASC,
) -> list[Employee]:
    if isinstance(sort_by, SortField):
        sort_by = sort_by.value
    key = SORT_KEYS.get(sort_by) if sort_by else None
    if key is None:
        return records
    # sorted() keeps equal keys in their original order for reverse=True too
    return sorted(records, key=key, reverse=SortOrder(sort_order) is SortOrder.DESC)


def paginate(records: Sequence[Employee], page: int, limit: int) -> list[Employee]:
    start = (page - 1) * limit
    return list(records[start : start + limit])


def execute_query(records: Iterable[Employee], query: EmployeeQuery) -> EmployeePage:
    filtered = filter_employees(records, query)
    ordered = sort_employees(filtered, query.sort_by, query.sort_order)
    return EmployeePage(
        employees=paginate(ordered, query.page, query.limit),
        total=len(ordered),
        page=query.page,
        limit=query.limit,
    )


def _distinct(values: Iterable[str]) -> list[str]:
    return list(dict.fromkeys(values))


def extract_filter_options(records: Sequence[Employee]) -> EmployeeFilters:
    return EmployeeFilters(
        departments=_distinct(r.department for r in records),
        titles=_distinct(r.title for r in records),
        locations=_distinct(r.location for r in records),
    )
