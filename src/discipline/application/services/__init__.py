from discipline.application.services.habit_check_service import HabitCheckService
from discipline.application.services.habit_service import HabitService

__all__ = ["HabitCheckService", "HabitService"]
