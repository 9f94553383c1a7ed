"""Storefront API entrypoint and HTTP route wiring."""

from __future__ import annotations

import logging

import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from print_storefront.application.services.auth_service import AuthService
from print_storefront.application.services.health_service import HealthService
from print_storefront.application.services.registration_service import RegistrationService
from print_storefront.config.settings import Settings, load_settings
from print_storefront.infrastructure.db.database_probe import SqlAlchemyDatabaseProbe
from print_storefront.infrastructure.db.session import create_session_factory
from print_storefront.infrastructure.db.user_repository import SqlAlchemyUserRepository
from print_storefront.infrastructure.http.auth_router import (
    build_auth_router,
    request_validation_error_handler,
)
from print_storefront.infrastructure.http.health_router import build_health_router
from print_storefront.infrastructure.logging import configure_logging
from print_storefront.infrastructure.security.password_hasher import BcryptPasswordHasher

API_HOST = "0.0.0.0"
API_PORT = 8000
logger = logging.getLogger(__name__)


def build_registration_service(
    session_factory: async_sessionmaker[AsyncSession],
    settings: Settings,
) -> RegistrationService:
    """Build registration service with SQLAlchemy-backed dependencies."""

    return RegistrationService(
        users=SqlAlchemyUserRepository(session_factory),
        password_hasher=BcryptPasswordHasher(rounds=settings.bcrypt_rounds),
        store_timeout_seconds=settings.store_timeout_seconds,
        hash_timeout_seconds=settings.hash_timeout_seconds,
    )


def build_auth_service(
    session_factory: async_sessionmaker[AsyncSession],
    settings: Settings,
) -> AuthService:
    """Build authentication service with SQLAlchemy-backed dependencies."""

    return AuthService(
        users=SqlAlchemyUserRepository(session_factory),
        password_hasher=BcryptPasswordHasher(rounds=settings.bcrypt_rounds),
        store_timeout_seconds=settings.store_timeout_seconds,
        hash_timeout_seconds=settings.hash_timeout_seconds,
    )


def build_health_service(
    session_factory: async_sessionmaker[AsyncSession],
    settings: Settings,
) -> HealthService:
    """Build health service probing the shared session factory."""

    return HealthService(
        probe=SqlAlchemyDatabaseProbe(session_factory),
        version=settings.app_version,
        timeout_seconds=settings.store_timeout_seconds,
    )


def create_app(
    *,
    registration_service: RegistrationService | None = None,
    auth_service: AuthService | None = None,
    health_service: HealthService | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    """Create FastAPI app for credential and health routes.

    Services passed in are used as-is; missing ones are built from settings
    around a single shared session factory.
    """

    if registration_service is None or auth_service is None or health_service is None:
        if settings is None:
            settings = load_settings()
        session_factory = create_session_factory(settings.database_url)
        if registration_service is None:
            registration_service = build_registration_service(session_factory, settings)
        if auth_service is None:
            auth_service = build_auth_service(session_factory, settings)
        if health_service is None:
            health_service = build_health_service(session_factory, settings)
    if settings is not None:
        configure_logging(level=settings.log_level)

    app = FastAPI(title="print-storefront")
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.include_router(
        build_auth_router(
            registration_service=registration_service,
            auth_service=auth_service,
        )
    )
    app.include_router(build_health_router(health_service=health_service))
    logger.info("storefront_api_app_created")
    return app


def run_asgi_server(*, host: str = API_HOST, port: int = API_PORT) -> None:
    """Run the API as a long-lived ASGI process using application factory mode."""

    uvicorn.run(
        "apps.api.main:create_app",
        host=host,
        port=port,
        factory=True,
    )


def main() -> None:
    """Run storefront API runtime process."""

    run_asgi_server()


if __name__ == "__main__":
    main()
