"""User lookup endpoint."""

from fastapi import APIRouter, Depends, Request

from cicd_api.api.deps import get_user_store
from cicd_api.core.errors import ErrorEnvelope, ErrorKind, NOT_FOUND_MESSAGE, error_response
from cicd_api.db.users import User, UserStore

USERS_PREFIX = "/api/users"

router = APIRouter(prefix=USERS_PREFIX, tags=["Users"])

USER_NOT_FOUND_MESSAGE = "User not found"


def raw_id_segment(request: Request) -> str:
    """
    Return the still-encoded path text after ``/api/users/``.

    Routing sees the decoded path, where ``%2F`` has already become a
    separator; the raw path keeps an encoded slash inside one segment.
    """
    raw_path = request.scope.get("raw_path") or request.url.path.encode()
    path = raw_path.split(b"?", 1)[0].decode("latin-1")
    return path[len(USERS_PREFIX) + 1:]


@router.get(
    "/{user_id:path}",
    response_model=User,
    responses={404: {"model": ErrorEnvelope}},
)
def get_user(user_id: str, request: Request, store: UserStore = Depends(get_user_store)):
    """Get a user by id."""
    segment = raw_id_segment(request)
    # Exactly one non-empty raw segment: /api/users/123/posts is not this route
    if not segment or "/" in segment:
        return error_response(ErrorKind.NOT_FOUND, NOT_FOUND_MESSAGE)

    user = store.find(user_id)
    if user is None:
        return error_response(ErrorKind.RESOURCE_NOT_FOUND, USER_NOT_FOUND_MESSAGE)
    return user
