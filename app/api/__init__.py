# API module exports
from app.api import calendar, health, tasks
from app.api.base import api_router

__all__ = ["calendar", "health", "tasks", "api_router"]
