"""Habit schemas for request/response models."""

from datetime import date, datetime
from typing import Optional
from uuid import UUID

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class HabitCreateRequest(BaseModel):
    """Request schema for creating a habit."""

    title: str = Field(..., description="Habit title, unique per user")
    description: str = Field(
        default="",
        validation_alias=AliasChoices("description", "desc"),
        description="Free-text description",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Run",
                "description": "5k before breakfast",
            },
        },
    )


class HabitCreateResponse(BaseModel):
    """Response schema for a created habit."""

    habit_id: UUID


class HabitUpdateRequest(BaseModel):
    """Request schema for updating a habit. Omitted fields stay unchanged."""

    title: Optional[str] = None
    description: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("description", "desc"),
    )


class HabitResponse(BaseModel):
    """Response schema for a single habit."""

    id: UUID
    title: str
    description: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class HabitListResponse(BaseModel):
    """Response schema for one page of the caller's habits."""

    uid: UUID
    page: int
    limit: int
    habits: list[HabitResponse]


class HabitCheckResponse(BaseModel):
    """Response schema for a habit check."""

    check_date: date
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class HabitStatsResponse(BaseModel):
    """Response schema for habit statistics."""

    habit_id: UUID
    total_checks: int
    current_streak: int
    max_streak: int
    last_check: Optional[date]

    model_config = ConfigDict(from_attributes=True)
