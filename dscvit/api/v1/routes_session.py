# File: dscvit/api/v1/routes_session.py

from fastapi import APIRouter, Depends

from dscvit.api.deps import get_current_session_id

router = APIRouter()


@router.get("", summary="Current session identifier")
def read_session(session_id: str = Depends(get_current_session_id)):
    """
    Return the caller's session id, setting the session cookie on the first
    visit.
    """
    return {"session_id": session_id}
