"""FastAPI router for signup and login endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from print_storefront.application.dto.auth_models import (
    AuthSuccessResponse,
    ErrorResponse,
    LoginRequest,
    SignupRequest,
    UserPayload,
)
from print_storefront.application.services.auth_service import AuthService
from print_storefront.application.services.registration_service import RegistrationService
from print_storefront.domain.auth.errors import AuthError, AuthErrorKind, ValidationError

STATUS_BY_ERROR_KIND: dict[AuthErrorKind, int] = {
    AuthErrorKind.VALIDATION: 400,
    AuthErrorKind.CONFLICT: 409,
    AuthErrorKind.INVALID_CREDENTIALS: 401,
    AuthErrorKind.INTERNAL: 500,
}

SIGNUP_SUCCESS_MESSAGE = "Signup completed."
LOGIN_SUCCESS_MESSAGE = "Login succeeded."

logger = logging.getLogger(__name__)


def build_auth_router(
    *,
    registration_service: RegistrationService,
    auth_service: AuthService,
) -> APIRouter:
    """Build router exposing signup and login endpoints."""

    router = APIRouter(prefix="/api/auth", tags=["auth"])

    @router.post(
        "/signup",
        response_model=AuthSuccessResponse,
        responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
    )
    async def signup(payload: SignupRequest) -> JSONResponse:
        try:
            profile = await registration_service.register(
                name=payload.name,
                email=payload.email,
                password=payload.password,
                phone=payload.phone,
            )
        except AuthError as exc:
            return error_response(exc)

        return _success_response(
            AuthSuccessResponse(
                message=SIGNUP_SUCCESS_MESSAGE,
                user=UserPayload.from_profile(profile),
            )
        )

    @router.post(
        "/login",
        response_model=AuthSuccessResponse,
        responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}},
    )
    async def login(payload: LoginRequest) -> JSONResponse:
        try:
            profile = await auth_service.authenticate(
                email=payload.email,
                password=payload.password,
            )
        except AuthError as exc:
            return error_response(exc)

        return _success_response(
            AuthSuccessResponse(
                message=LOGIN_SUCCESS_MESSAGE,
                user=UserPayload.from_profile(profile),
            )
        )

    return router


def error_response(error: AuthError) -> JSONResponse:
    """Render one auth error with its mapped status and public message."""

    body = ErrorResponse(message=error.public_message)
    return JSONResponse(
        status_code=STATUS_BY_ERROR_KIND[error.kind],
        content=body.model_dump(mode="json"),
    )


async def request_validation_error_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    """Render malformed or wrongly typed request bodies as the 400 envelope."""

    logger.info(
        "request_rejected path=%s error_types=%s",
        request.url.path,
        ",".join(sorted({str(error.get("type")) for error in exc.errors()})),
    )
    return error_response(ValidationError())


def _success_response(body: AuthSuccessResponse) -> JSONResponse:
    return JSONResponse(status_code=200, content=body.model_dump(mode="json", by_alias=True))
