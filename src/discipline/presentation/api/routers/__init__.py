from discipline.presentation.api.routers.auth import router as auth_router
from discipline.presentation.api.routers.habits import router as habits_router

__all__ = [
    "auth_router",
    "habits_router",
]
