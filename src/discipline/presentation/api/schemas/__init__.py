"""Pydantic schemas for API requests and responses."""

from discipline.presentation.api.schemas.auth import (
    ChangePasswordRequest,
    DeleteAccountRequest,
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
    UserResponse,
)
from discipline.presentation.api.schemas.habits import (
    HabitCheckResponse,
    HabitCreateRequest,
    HabitCreateResponse,
    HabitListResponse,
    HabitResponse,
    HabitStatsResponse,
    HabitUpdateRequest,
)

__all__ = [
    "ChangePasswordRequest",
    "DeleteAccountRequest",
    "HabitCheckResponse",
    "HabitCreateRequest",
    "HabitCreateResponse",
    "HabitListResponse",
    "HabitResponse",
    "HabitStatsResponse",
    "HabitUpdateRequest",
    "LoginRequest",
    "LoginResponse",
    "RegisterRequest",
    "RegisterResponse",
    "UserResponse",
]
