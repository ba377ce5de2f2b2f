"""Authentication router for registration, login and account management."""

import logging

from fastapi import APIRouter, Response, status

from discipline.presentation.api.dependencies import (
    CurrentIdentity,
    DBSession,
    IdentityServiceDep,
    TokenServiceDep,
)
from discipline.presentation.api.schemas.auth import (
    ChangePasswordRequest,
    DeleteAccountRequest,
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
    UserResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    summary="Create an account",
    responses={
        201: {"description": "Account created"},
        400: {"description": "Invalid name or password"},
        409: {"description": "Name already taken"},
    },
)
async def register(
    request: RegisterRequest,
    identity_service: IdentityServiceDep,
    session: DBSession,
) -> RegisterResponse:
    try:
        user = await identity_service.register(request.name, request.password)
        await session.commit()
    except Exception:
        await session.rollback()
        raise

    return RegisterResponse(uid=user.id)


@router.post(
    "/login",
    summary="Exchange credentials for a token",
    responses={
        200: {"description": "Token issued"},
        403: {"description": "Wrong password"},
        404: {"description": "Unknown user"},
    },
)
async def login(
    request: LoginRequest,
    identity_service: IdentityServiceDep,
    token_service: TokenServiceDep,
) -> LoginResponse:
    """
    Authenticate with name and password.

    Returns a bearer token valid for the configured lifetime.
    """
    user = await identity_service.login(request.name, request.password)
    token = token_service.issue_token(user)

    return LoginResponse(
        uid=user.id,
        token=token,
        expires_in=int(token_service.token_ttl.total_seconds()),
    )


@router.get(
    "/me",
    summary="Who am I",
    responses={
        200: {"description": "Current user"},
        401: {"description": "Missing, invalid or expired token"},
    },
)
async def me(
    identity: CurrentIdentity,
    identity_service: IdentityServiceDep,
) -> UserResponse:
    user = await identity_service.get_by_id(identity.user_id)
    return UserResponse.model_validate(user)


@router.post(
    "/change-password",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Replace the password",
    responses={
        204: {"description": "Password changed"},
        400: {"description": "New password does not meet the rules"},
        403: {"description": "Current password is wrong"},
    },
)
async def change_password(
    request: ChangePasswordRequest,
    identity: CurrentIdentity,
    identity_service: IdentityServiceDep,
    session: DBSession,
) -> Response:
    try:
        await identity_service.change_password(
            identity.user_id,
            request.current_password,
            request.new_password,
        )
        await session.commit()
    except Exception:
        await session.rollback()
        raise

    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/account",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete account",
    responses={
        204: {"description": "Account and all habits deleted"},
        403: {"description": "Password is wrong"},
    },
)
async def delete_account(
    request: DeleteAccountRequest,
    identity: CurrentIdentity,
    identity_service: IdentityServiceDep,
    session: DBSession,
) -> Response:
    """
    Delete the caller's account.

    The password is verified again. All habits and checks of the user are
    removed with it.
    """
    try:
        await identity_service.delete_account(identity.user_id, request.password)
        await session.commit()
    except Exception:
        await session.rollback()
        raise

    logger.info("Account deleted via API: %s", identity.user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
