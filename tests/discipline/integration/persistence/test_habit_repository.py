"""Integration tests for the SQLAlchemy habit and check repositories."""

from datetime import date, datetime, timedelta, timezone
from uuid import uuid4

import pytest
import pytest_asyncio

from discipline.domain.habit import Habit
from discipline.domain.shared.exceptions import (
    StorageConflictError,
    StorageReferenceError,
)
from discipline.infrastructure.persistence.sqlalchemy.repositories import (
    HabitCheckRepositorySQLAlchemy,
    HabitRepositorySQLAlchemy,
)
from tests.shared.fixtures.database import TEST_USER_ID, TEST_USER_ID_2

DAY = date(2024, 6, 15)


class TestHabitRepository:
    """Tests for HabitRepositorySQLAlchemy."""

    @pytest.mark.asyncio
    async def test_create_and_find(self, db_session):
        repo = HabitRepositorySQLAlchemy(db_session)
        habit = Habit.create(TEST_USER_ID, "Run", "5k")

        habit_id = await repo.create(habit)
        await db_session.commit()

        found = await repo.find_by_id(habit_id)
        assert found is not None
        assert found.title == "Run"
        assert found.description == "5k"
        assert found.owner_id == TEST_USER_ID
        assert found.created_at.tzinfo is not None

    @pytest.mark.asyncio
    async def test_find_missing(self, db_session):
        repo = HabitRepositorySQLAlchemy(db_session)

        assert await repo.find_by_id(uuid4()) is None

    @pytest.mark.asyncio
    async def test_duplicate_title_for_same_owner_conflicts(self, db_session):
        repo = HabitRepositorySQLAlchemy(db_session)
        await repo.create(Habit.create(TEST_USER_ID, "Run"))
        await db_session.commit()

        with pytest.raises(StorageConflictError):
            await repo.create(Habit.create(TEST_USER_ID, "Run"))

    @pytest.mark.asyncio
    async def test_same_title_for_other_owner_is_allowed(self, db_session):
        repo = HabitRepositorySQLAlchemy(db_session)
        await repo.create(Habit.create(TEST_USER_ID, "Run"))
        await repo.create(Habit.create(TEST_USER_ID_2, "Run"))
        await db_session.commit()

        assert len(await repo.find_by_owner(TEST_USER_ID_2, 10, 0)) == 1

    @pytest.mark.asyncio
    async def test_unknown_owner_is_a_reference_error(self, db_session):
        repo = HabitRepositorySQLAlchemy(db_session)

        with pytest.raises(StorageReferenceError):
            await repo.create(Habit.create(uuid4(), "Run"))

    @pytest.mark.asyncio
    async def test_find_by_owner_pages_in_creation_order(self, db_session):
        repo = HabitRepositorySQLAlchemy(db_session)
        titles = [f"Habit {i}" for i in range(1, 11)]
        start = datetime(2024, 6, 1, tzinfo=timezone.utc)
        for i, title in enumerate(titles):
            created_at = start + timedelta(minutes=i)
            await repo.create(Habit(TEST_USER_ID, title, created_at=created_at))
        await db_session.commit()

        page = await repo.find_by_owner(TEST_USER_ID, limit=4, offset=4)

        assert [habit.title for habit in page] == titles[4:8]

    @pytest.mark.asyncio
    async def test_same_instant_habits_page_by_id(self, db_session):
        repo = HabitRepositorySQLAlchemy(db_session)
        same_instant = datetime(2024, 6, 1, tzinfo=timezone.utc)
        habits = [
            Habit(TEST_USER_ID, f"Habit {i}", created_at=same_instant)
            for i in range(7)
        ]
        for habit in habits:
            await repo.create(habit)
        await db_session.commit()

        pages = [
            await repo.find_by_owner(TEST_USER_ID, limit=3, offset=offset)
            for offset in (0, 3, 6)
        ]

        listed = [habit.id for page in pages for habit in page]
        assert listed == sorted(habit.id for habit in habits)

    @pytest.mark.asyncio
    async def test_find_by_owner_unknown_owner(self, db_session):
        repo = HabitRepositorySQLAlchemy(db_session)

        assert await repo.find_by_owner(uuid4(), 10, 0) == []

    @pytest.mark.asyncio
    async def test_update(self, db_session):
        repo = HabitRepositorySQLAlchemy(db_session)
        habit = Habit.create(TEST_USER_ID, "Run")
        await repo.create(habit)
        await db_session.commit()

        habit.rename("Swim")
        habit.describe("1km")
        assert await repo.update(habit) is True
        await db_session.commit()

        found = await repo.find_by_id(habit.id)
        assert found.title == "Swim"
        assert found.description == "1km"

    @pytest.mark.asyncio
    async def test_update_onto_taken_title_conflicts(self, db_session):
        repo = HabitRepositorySQLAlchemy(db_session)
        await repo.create(Habit.create(TEST_USER_ID, "Run"))
        read = Habit.create(TEST_USER_ID, "Read")
        await repo.create(read)
        await db_session.commit()

        read.rename("Run")
        with pytest.raises(StorageConflictError):
            await repo.update(read)

    @pytest.mark.asyncio
    async def test_update_missing(self, db_session):
        repo = HabitRepositorySQLAlchemy(db_session)

        assert await repo.update(Habit.create(TEST_USER_ID, "Ghost")) is False

    @pytest.mark.asyncio
    async def test_delete_cascades_to_checks(self, db_session):
        habits = HabitRepositorySQLAlchemy(db_session)
        checks = HabitCheckRepositorySQLAlchemy(db_session)
        habit = Habit.create(TEST_USER_ID, "Run")
        await habits.create(habit)
        await checks.create(habit.id, DAY)
        await db_session.commit()

        assert await habits.delete(habit.id) is True
        await db_session.commit()

        assert await habits.find_by_id(habit.id) is None
        assert await checks.count_by_habit(habit.id) == 0
        assert await habits.delete(habit.id) is False


class TestHabitCheckRepository:
    """Tests for HabitCheckRepositorySQLAlchemy."""

    @pytest_asyncio.fixture
    async def habit(self, db_session):
        habit = Habit.create(TEST_USER_ID, "Run")
        await HabitRepositorySQLAlchemy(db_session).create(habit)
        await db_session.commit()
        return habit

    @pytest.mark.asyncio
    async def test_create_and_exists(self, db_session, habit):
        repo = HabitCheckRepositorySQLAlchemy(db_session)

        await repo.create(habit.id, DAY)
        await db_session.commit()

        assert await repo.exists(habit.id, DAY) is True
        assert await repo.exists(habit.id, DAY - timedelta(days=1)) is False

    @pytest.mark.asyncio
    async def test_second_check_same_day_conflicts(self, db_session, habit):
        repo = HabitCheckRepositorySQLAlchemy(db_session)
        await repo.create(habit.id, DAY)
        await db_session.commit()

        with pytest.raises(StorageConflictError):
            await repo.create(habit.id, DAY)

    @pytest.mark.asyncio
    async def test_check_for_unknown_habit_is_a_reference_error(self, db_session):
        repo = HabitCheckRepositorySQLAlchemy(db_session)

        with pytest.raises(StorageReferenceError):
            await repo.create(uuid4(), DAY)

    @pytest.mark.asyncio
    async def test_delete(self, db_session, habit):
        repo = HabitCheckRepositorySQLAlchemy(db_session)
        await repo.create(habit.id, DAY)
        await db_session.commit()

        assert await repo.delete(habit.id, DAY) is True
        assert await repo.delete(habit.id, DAY) is False

    @pytest.mark.asyncio
    async def test_find_by_range_is_inclusive_and_ordered(self, db_session, habit):
        repo = HabitCheckRepositorySQLAlchemy(db_session)
        for offset in (0, 5, 2, 9):
            await repo.create(habit.id, DAY - timedelta(days=offset))
        await db_session.commit()

        checks = await repo.find_by_range(
            habit.id,
            DAY - timedelta(days=5),
            DAY,
        )

        assert [check.check_date for check in checks] == [
            DAY - timedelta(days=5),
            DAY - timedelta(days=2),
            DAY,
        ]
        assert all(check.habit_id == habit.id for check in checks)
        assert all(isinstance(check.id, int) for check in checks)

    @pytest.mark.asyncio
    async def test_last_check_date_and_count(self, db_session, habit):
        repo = HabitCheckRepositorySQLAlchemy(db_session)
        assert await repo.last_check_date(habit.id) is None
        assert await repo.count_by_habit(habit.id) == 0

        for offset in (3, 1, 7):
            await repo.create(habit.id, DAY - timedelta(days=offset))
        await db_session.commit()

        assert await repo.last_check_date(habit.id) == DAY - timedelta(days=1)
        assert await repo.count_by_habit(habit.id) == 3
