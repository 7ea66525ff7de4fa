"""API sub-routers assembled into a single api_router."""

from fastapi import APIRouter

from taskmind.api.routers.classification import router as classification_router
from taskmind.api.routers.health import router as health_router
from taskmind.api.routers.tasks import router as tasks_router

api_router = APIRouter()

api_router.include_router(health_router, tags=["health"])
api_router.include_router(classification_router, tags=["classification"])
api_router.include_router(tasks_router, prefix="/tasks", tags=["tasks"])
