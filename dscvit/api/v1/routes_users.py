# File: dscvit/api/v1/routes_users.py

"""
User endpoints for the caller's own record.

The record is keyed by the session id; a caller never names an id
explicitly.
"""

from fastapi import APIRouter, Depends, HTTPException, Response, status
from pydantic import BaseModel
from sqlalchemy.orm import Session

from dscvit.api.deps import get_current_session_id, get_db
from dscvit.schemas.user import UserCreate, UserFields, UserRead, UserUpdate
from dscvit.services.user_service import (
    UserNotFoundError,
    create_user,
    find_user,
    update_user,
)

router = APIRouter()


class UserCreated(BaseModel):
    created: bool
    user: UserRead


def _not_found(e: UserNotFoundError, response: Response) -> HTTPException:
    # A session minted for this request still has to reach the caller
    headers = {"set-cookie": v for v in response.headers.getlist("set-cookie")}
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"No user for session {e.user_id}",
        headers=headers or None,
    )


@router.get("/me", response_model=UserRead, summary="Current user")
def read_me(
    response: Response,
    session_id: str = Depends(get_current_session_id),
    db: Session = Depends(get_db),
):
    try:
        return find_user(db, session_id)
    except UserNotFoundError as e:
        raise _not_found(e, response)


@router.post("/me", response_model=UserCreated, summary="Register the current session")
def register_me(
    session_id: str = Depends(get_current_session_id),
    db: Session = Depends(get_db),
):
    """
    Create the anonymous user row for this session if it does not exist yet.
    Safe to call repeatedly.
    """
    count = create_user(db, UserCreate(id=session_id))
    db.commit()
    user = find_user(db, session_id)
    return UserCreated(created=count == 1, user=UserRead.model_validate(user))


@router.put("/me", response_model=UserRead, summary="Replace the current user's profile")
def update_me(
    payload: UserFields,
    response: Response,
    session_id: str = Depends(get_current_session_id),
    db: Session = Depends(get_db),
):
    """
    Full replacement of username, password and activated. Fields left out of
    the body are cleared.
    """
    try:
        user = update_user(db, UserUpdate(id=session_id, **payload.model_dump()))
    except UserNotFoundError as e:
        db.rollback()
        raise _not_found(e, response)
    db.commit()
    return user
