"""Welcome endpoint."""

from fastapi import APIRouter

router = APIRouter(tags=["Home"])

WELCOME_MESSAGE = "Welcome to our API!"


@router.get("/")
def read_root():
    """Return the welcome message."""
    return {"message": WELCOME_MESSAGE}
