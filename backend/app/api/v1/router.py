from fastapi import APIRouter

from app.api.v1.endpoints import employees, health
from app.core.config import settings

api_router = APIRouter(prefix=settings.API_PREFIX)
api_router.include_router(health.router)
api_router.include_router(employees.router)
