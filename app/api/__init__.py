# API module exports
from app.api import health, projects, suggestions
from app.api.base import api_router

__all__ = ["health", "projects", "suggestions", "api_router"]
