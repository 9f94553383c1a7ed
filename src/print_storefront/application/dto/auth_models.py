"""Pydantic models for signup, login, and health HTTP contracts."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from print_storefront.application.ports.user_repository_port import UserProfile


class LenientModel(BaseModel):
    """Request base model that tolerates unknown fields and absent values."""

    model_config = ConfigDict(extra="ignore")


class SignupRequest(LenientModel):
    """HTTP request model for account registration."""

    name: str | None = None
    email: str | None = None
    password: str | None = None
    phone: str | None = None


class LoginRequest(LenientModel):
    """HTTP request model for credential login."""

    email: str | None = None
    password: str | None = None


class UserPayload(BaseModel):
    """Public user representation; never includes credential material."""

    id: int
    name: str
    email: str
    phone: str | None = None
    created_at: datetime = Field(serialization_alias="createdAt")

    @classmethod
    def from_profile(cls, profile: UserProfile) -> UserPayload:
        return cls(
            id=profile.user_id,
            name=profile.name,
            email=profile.email,
            phone=profile.phone,
            created_at=profile.created_at,
        )


class AuthSuccessResponse(BaseModel):
    """HTTP response envelope for successful signup and login."""

    success: Literal[True] = True
    message: str
    user: UserPayload


class ErrorResponse(BaseModel):
    """HTTP response envelope for every auth failure."""

    success: Literal[False] = False
    message: str


class DatabaseHealth(BaseModel):
    """Database section of the health payload."""

    connected: bool
    status: Literal["healthy", "unhealthy"]


class HealthResponse(BaseModel):
    """HTTP response model for the health endpoint."""

    status: Literal["ok", "error"]
    timestamp: datetime
    database: DatabaseHealth
    version: str
