"""HTTP API for Discipline (FastAPI)."""

from discipline.presentation.api.app import create_app

__all__ = ["create_app"]
