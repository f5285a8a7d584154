from __future__ import annotations

from fastapi import APIRouter, Depends

from app.core.config import settings
from app.core.dependencies import get_employee_service
from app.services.employee_service import EmployeeService

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health_check(service: EmployeeService = Depends(get_employee_service)):  # noqa: B008
    services: dict[str, str] = {}

    if not settings.SEED_ENABLED:
        services["seed"] = "not_configured"
    elif service.count():
        services["seed"] = "ok"
    else:
        services["seed"] = "empty"

    services["employee_store"] = "ok" if service.initialized else "not_initialized"

    all_ok = all(v in ("ok", "not_configured") for v in services.values())

    return {
        "status": "healthy" if all_ok else "degraded",
        "version": settings.APP_VERSION,
        "services": services,
        "employees": service.count(),
    }


@router.get("/ready")
async def readiness_probe():
    return {"ready": True}
