from fastapi import APIRouter

from taskboard.api.v1.routes_tasks import router as tasks_router
from taskboard.api.v1.routes_users import router as users_router


api_router = APIRouter()

api_router.include_router(users_router, prefix="/users", tags=["users"])
api_router.include_router(tasks_router, prefix="/tasks", tags=["tasks"])
