"""Bodies of the ``/auth`` endpoints."""

from datetime import datetime
from typing import Literal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

_CREDENTIALS_EXAMPLE = {"name": "runner_42", "password": "securepassword123"}


class _Credentials(BaseModel):
    # Length and character rules belong to CredentialValidator, which reports
    # every violation at once; the schema only asks for two strings.
    name: str = Field(..., description="Login name")
    password: str = Field(..., description="Plain-text password")

    model_config = ConfigDict(json_schema_extra={"example": _CREDENTIALS_EXAMPLE})


class RegisterRequest(_Credentials):
    """Name: 3-100 chars starting with a letter. Password: 8-72 bytes."""


class LoginRequest(_Credentials):
    pass


class RegisterResponse(BaseModel):
    uid: UUID


class LoginResponse(BaseModel):
    """A bearer token and how long it stays valid."""

    uid: UUID
    token: str
    token_type: Literal["bearer"] = "bearer"
    expires_in: int = Field(..., description="Seconds until the token expires")


class ChangePasswordRequest(BaseModel):
    current_password: str
    new_password: str


class DeleteAccountRequest(BaseModel):
    password: str = Field(..., description="Current password, asked again")


class UserResponse(BaseModel):
    """Public view of an account; the password digest is never included."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    created_at: datetime
