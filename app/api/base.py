from fastapi import APIRouter
from app.api import calendar, health, tasks

api_router = APIRouter()

# Include all sub-routers
api_router.include_router(tasks.router)
api_router.include_router(calendar.router)
api_router.include_router(health.router)
