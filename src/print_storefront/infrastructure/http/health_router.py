"""FastAPI router for the container health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from print_storefront.application.dto.auth_models import DatabaseHealth, HealthResponse
from print_storefront.application.services.health_service import HealthService


def build_health_router(*, health_service: HealthService) -> APIRouter:
    """Build router exposing store connectivity status."""

    router = APIRouter(prefix="/api", tags=["health"])

    @router.get(
        "/health",
        response_model=HealthResponse,
        responses={503: {"model": HealthResponse}},
    )
    async def health() -> JSONResponse:
        report = await health_service.check()
        body = HealthResponse(
            status="ok" if report.is_healthy else "error",
            timestamp=report.checked_at,
            database=DatabaseHealth(
                connected=report.database_connected,
                status="healthy" if report.database_connected else "unhealthy",
            ),
            version=report.version,
        )
        return JSONResponse(
            status_code=200 if report.is_healthy else 503,
            content=body.model_dump(mode="json"),
            headers={"Cache-Control": "no-cache"},
        )

    return router
