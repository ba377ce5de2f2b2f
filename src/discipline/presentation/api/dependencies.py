"""Request-scoped wiring for the HTTP layer.

Each request gets one ``AsyncSession``; every repository and service built
for that request shares it, so a router's ``commit`` covers all their
writes at once.
"""

import logging
from datetime import timedelta
from functools import lru_cache
from typing import Annotated, AsyncGenerator

from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from discipline.application.services import HabitCheckService, HabitService
from discipline.infrastructure.persistence.sqlalchemy.init_db import create_engine
from discipline.infrastructure.persistence.sqlalchemy.repositories import (
    HabitCheckRepositorySQLAlchemy,
    HabitRepositorySQLAlchemy,
)
from discipline.presentation.api.config import get_api_settings
from discipline.presentation.api.middleware import bind_user_id
from discipline_config.settings import Settings, get_settings
from discipline_identity import (
    AuthenticatedIdentity,
    CredentialValidator,
    IdentityService,
    PasswordHashingService,
    RequestAuthenticationGate,
    TokenService,
)
from discipline_identity.infrastructure.persistence.sqlalchemy import (
    UserRepositorySQLAlchemy,
)

logger = logging.getLogger(__name__)

SettingsDep = Annotated[Settings, Depends(get_api_settings)]


@lru_cache(maxsize=1)
def get_engine() -> AsyncEngine:
    """Process-wide engine; its pool is shared by all requests."""
    settings = get_settings()
    settings.ensure_sqlite_directory()
    logger.debug("Creating database engine for backend %s", settings.database_backend)
    return create_engine(settings.database_url)


@lru_cache(maxsize=1)
def get_session_maker() -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(get_engine(), class_=AsyncSession, expire_on_commit=False)


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Yield the session for one request.

    Routers commit once the service call has succeeded. Whatever is still
    uncommitted when the session closes is rolled back.
    """
    async with get_session_maker()() as session:
        yield session


DBSession = Annotated[AsyncSession, Depends(get_db_session)]


def get_token_service(settings: SettingsDep) -> TokenService:
    return TokenService(
        secret_key=settings.jwt_secret_key.get_secret_value(),
        token_ttl=timedelta(hours=settings.jwt_access_token_expire_hours),
    )


def get_password_service(settings: SettingsDep) -> PasswordHashingService:
    return PasswordHashingService(rounds=settings.bcrypt_rounds)


def get_credential_validator() -> CredentialValidator:
    return CredentialValidator()


def get_identity_service(
    session: DBSession,
    settings: SettingsDep,
    password_service: PasswordHashingService = Depends(get_password_service),
    validator: CredentialValidator = Depends(get_credential_validator),
) -> IdentityService:
    return IdentityService(
        user_repository=UserRepositorySQLAlchemy(session),
        password_service=password_service,
        validator=validator,
        timeout=settings.storage_timeout_seconds,
    )


TokenServiceDep = Annotated[TokenService, Depends(get_token_service)]
IdentityServiceDep = Annotated[IdentityService, Depends(get_identity_service)]


def get_authentication_gate(
    token_service: TokenServiceDep,
    identity_service: IdentityServiceDep,
) -> RequestAuthenticationGate:
    return RequestAuthenticationGate(
        token_service=token_service,
        identity_service=identity_service,
    )


async def get_authenticated_identity(
    authorization: Annotated[str | None, Header()] = None,
    gate: RequestAuthenticationGate = Depends(get_authentication_gate),
) -> AuthenticatedIdentity:
    """Resolve the caller from the ``Authorization`` header.

    Missing, malformed, foreign-signed and expired tokens, as well as
    tokens of deleted accounts, surface as domain exceptions and are
    rendered by the exception handlers. On success the caller's id is
    bound to the request's log records.
    """
    identity = await gate.authenticate(authorization)
    bind_user_id(identity.user_id)
    return identity


# Protected handlers take this as an explicit parameter
CurrentIdentity = Annotated[AuthenticatedIdentity, Depends(get_authenticated_identity)]


def get_habit_service(session: DBSession, settings: SettingsDep) -> HabitService:
    return HabitService(
        habit_repository=HabitRepositorySQLAlchemy(session),
        timeout=settings.storage_timeout_seconds,
    )


def get_habit_check_service(
    session: DBSession,
    settings: SettingsDep,
) -> HabitCheckService:
    return HabitCheckService(
        habit_repository=HabitRepositorySQLAlchemy(session),
        check_repository=HabitCheckRepositorySQLAlchemy(session),
        timeout=settings.storage_timeout_seconds,
        streak_grace_days=settings.streak_grace_days,
    )


HabitServiceDep = Annotated[HabitService, Depends(get_habit_service)]
HabitCheckServiceDep = Annotated[HabitCheckService, Depends(get_habit_check_service)]
