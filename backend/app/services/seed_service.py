"""Startup seed data from the randomuser.me people API."""

from __future__ import annotations

import logging
import random
from typing import Any

import aiohttp

from app.core.config import Settings
from app.models.employee import Employee

logger = logging.getLogger(__name__)

DEPARTMENTS = ["Engineering", "Marketing", "Sales", "HR", "Finance", "Operations"]
TITLES = ["Software Engineer", "Senior Developer", "Team Lead", "Manager", "Director", "VP"]
LOCATIONS = ["New York", "San Francisco", "London", "Berlin", "Tokyo", "Remote"]

SALARY_MIN = 50_000
SALARY_MAX = 200_000
INACTIVE_PROBABILITY = 0.1


class SeedError(Exception):
    pass


def to_employee(person: dict[str, Any], rng: random.Random) -> Employee:
    """Map one randomuser result onto an employee with random placement."""
    return Employee(
        id=person["login"]["uuid"],
        first_name=person["name"]["first"],
        last_name=person["name"]["last"],
        email=person["email"],
        phone=person.get("phone", ""),
        department=rng.choice(DEPARTMENTS),
        title=rng.choice(TITLES),
        location=rng.choice(LOCATIONS),
        avatar=person.get("picture", {}).get("large", ""),
        date_of_birth=person.get("dob", {}).get("date", ""),
        hire_date=person.get("registered", {}).get("date", ""),
        salary=rng.randrange(SALARY_MIN, SALARY_MAX),
        status="inactive" if rng.random() < INACTIVE_PROBABILITY else "active",
    )


def to_employees(data: dict[str, Any], rng: random.Random | None = None) -> list[Employee]:
    rng = rng or random.Random()
    employees: list[Employee] = []
    for person in data.get("results", []):
        try:
            employees.append(to_employee(person, rng))
        except (KeyError, TypeError, ValueError) as e:
            logger.warning("Skipping malformed seed record: %s", e)
    return employees


async def fetch_seed_employees(settings: Settings, rng: random.Random | None = None) -> list[Employee]:
    params = {"results": str(settings.SEED_RESULTS), "nat": settings.SEED_NATIONALITIES}

    timeout = aiohttp.ClientTimeout(total=settings.SEED_TIMEOUT_SECONDS)
    async with aiohttp.ClientSession(timeout=timeout) as session:
        async with session.get(settings.SEED_URL, params=params) as response:
            if response.status != 200:
                error_text = await response.text()
                raise SeedError(f"Seed fetch failed: {response.status} - {error_text}")
            data = await response.json()

    employees = to_employees(data, rng)
    logger.info("Fetched %d seed employees from %s", len(employees), settings.SEED_URL)
    return employees
