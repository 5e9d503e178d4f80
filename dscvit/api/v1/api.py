from fastapi import APIRouter

from dscvit.api.v1.routes_session import router as session_router
from dscvit.api.v1.routes_users import router as users_router


api_router = APIRouter()

api_router.include_router(session_router, prefix="/session", tags=["session"])
api_router.include_router(users_router, prefix="/users", tags=["users"])
