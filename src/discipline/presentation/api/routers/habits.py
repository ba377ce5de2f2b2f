"""Habits router for habit management, daily checks and statistics."""

import logging
from datetime import date, timedelta
from typing import Annotated, Optional
from uuid import UUID

from fastapi import APIRouter, Query, Response, status

from discipline.domain.shared.time import today_utc
from discipline.presentation.api.dependencies import (
    CurrentIdentity,
    DBSession,
    HabitCheckServiceDep,
    HabitServiceDep,
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

logger = logging.getLogger(__name__)

router = APIRouter()

DEFAULT_PAGE_LIMIT = 10
MAX_PAGE_LIMIT = 50
DEFAULT_CHECKS_WINDOW_DAYS = 30

# Type aliases for query parameters using Annotated (modern FastAPI pattern)
PageParam = Annotated[int, Query(ge=1, description="Page number, starting at 1")]
LimitParam = Annotated[
    int,
    Query(ge=1, le=MAX_PAGE_LIMIT, description="Habits per page (1-50)"),
]
DateFromParam = Annotated[
    Optional[date],
    Query(alias="from", description="First day (inclusive), default 29 days ago"),
]
DateToParam = Annotated[
    Optional[date],
    Query(alias="to", description="Last day (inclusive), default today"),
]


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create habit",
    responses={
        201: {"description": "Habit created"},
        400: {"description": "Invalid title"},
        409: {"description": "Habit with this title already exists"},
    },
)
async def create_habit(
    request: HabitCreateRequest,
    identity: CurrentIdentity,
    habit_service: HabitServiceDep,
    session: DBSession,
) -> HabitCreateResponse:
    try:
        habit = await habit_service.create_habit(
            identity.user_id,
            request.title,
            request.description,
        )
        await session.commit()
    except Exception:
        await session.rollback()
        # Let the global exception handler process domain exceptions
        raise

    return HabitCreateResponse(habit_id=habit.id)


@router.get(
    "",
    summary="List habits",
    responses={200: {"description": "One page of the caller's habits"}},
)
async def list_habits(
    identity: CurrentIdentity,
    habit_service: HabitServiceDep,
    page: PageParam = 1,
    limit: LimitParam = DEFAULT_PAGE_LIMIT,
) -> HabitListResponse:
    """
    List the caller's habits in creation order.

    ``page`` and ``limit`` translate to ``offset = (page - 1) * limit``.
    """
    habits = await habit_service.get_user_habits(
        identity.user_id,
        limit=limit,
        offset=(page - 1) * limit,
    )
    return HabitListResponse(
        uid=identity.user_id,
        page=page,
        limit=limit,
        habits=[HabitResponse.model_validate(habit) for habit in habits],
    )


@router.get(
    "/{habit_id}",
    summary="Get habit",
    responses={
        200: {"description": "Habit details"},
        404: {"description": "Habit not found"},
    },
)
async def get_habit(
    habit_id: UUID,
    identity: CurrentIdentity,
    habit_service: HabitServiceDep,
) -> HabitResponse:
    habit = await habit_service.get_habit(habit_id, identity.user_id)
    return HabitResponse.model_validate(habit)


@router.patch(
    "/{habit_id}",
    summary="Update habit",
    responses={
        200: {"description": "Updated habit"},
        404: {"description": "Habit not found"},
        409: {"description": "Habit with this title already exists"},
    },
)
async def update_habit(
    habit_id: UUID,
    request: HabitUpdateRequest,
    identity: CurrentIdentity,
    habit_service: HabitServiceDep,
    session: DBSession,
) -> HabitResponse:
    try:
        habit = await habit_service.update_habit(
            habit_id,
            identity.user_id,
            title=request.title,
            description=request.description,
        )
        await session.commit()
    except Exception:
        await session.rollback()
        raise

    return HabitResponse.model_validate(habit)


@router.delete(
    "/{habit_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete habit",
    responses={
        204: {"description": "Habit and its checks deleted"},
        404: {"description": "Habit not found"},
    },
)
async def delete_habit(
    habit_id: UUID,
    identity: CurrentIdentity,
    habit_service: HabitServiceDep,
    session: DBSession,
) -> Response:
    try:
        await habit_service.delete_habit(habit_id, identity.user_id)
        await session.commit()
    except Exception:
        await session.rollback()
        raise

    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put(
    "/{habit_id}/checks/{check_date}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Check habit on a date",
    responses={
        204: {"description": "Habit checked"},
        404: {"description": "Habit not found"},
        409: {"description": "Already checked on this date"},
        422: {"description": "Date is in the future"},
    },
)
async def check_habit(
    habit_id: UUID,
    check_date: date,
    identity: CurrentIdentity,
    check_service: HabitCheckServiceDep,
    session: DBSession,
) -> Response:
    try:
        await check_service.check_habit(habit_id, identity.user_id, check_date)
        await session.commit()
    except Exception:
        await session.rollback()
        raise

    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{habit_id}/checks/{check_date}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Remove a habit check",
    responses={
        204: {"description": "Check removed"},
        404: {"description": "Habit or check not found"},
    },
)
async def uncheck_habit(
    habit_id: UUID,
    check_date: date,
    identity: CurrentIdentity,
    check_service: HabitCheckServiceDep,
    session: DBSession,
) -> Response:
    try:
        await check_service.uncheck_habit(habit_id, identity.user_id, check_date)
        await session.commit()
    except Exception:
        await session.rollback()
        raise

    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/{habit_id}/checks",
    summary="List habit checks",
    responses={
        200: {"description": "Checks in the range, oldest first"},
        400: {"description": "'from' is after 'to'"},
        404: {"description": "Habit not found"},
    },
)
async def list_checks(
    habit_id: UUID,
    identity: CurrentIdentity,
    check_service: HabitCheckServiceDep,
    date_from: DateFromParam = None,
    date_to: DateToParam = None,
) -> list[HabitCheckResponse]:
    if date_to is None:
        date_to = today_utc()
    if date_from is None:
        date_from = date_to - timedelta(days=DEFAULT_CHECKS_WINDOW_DAYS - 1)

    checks = await check_service.get_habit_checks(
        habit_id,
        identity.user_id,
        date_from,
        date_to,
    )
    return [HabitCheckResponse.model_validate(check) for check in checks]


@router.get(
    "/{habit_id}/stats",
    summary="Get habit statistics",
    responses={
        200: {"description": "Total checks and streaks"},
        404: {"description": "Habit not found"},
    },
)
async def get_stats(
    habit_id: UUID,
    identity: CurrentIdentity,
    check_service: HabitCheckServiceDep,
) -> HabitStatsResponse:
    stats = await check_service.get_habit_stats(habit_id, identity.user_id)
    return HabitStatsResponse.model_validate(stats)
