"""FastAPI dependencies resolving per-application collaborators."""

from fastapi import Request

from cicd_api.core.clock import ProcessClock
from cicd_api.db.users import UserStore


def get_clock(request: Request) -> ProcessClock:
    """Return the clock created with the application."""
    return request.app.state.clock


def get_user_store(request: Request) -> UserStore:
    """Return the user store created with the application."""
    return request.app.state.users
