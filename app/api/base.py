from fastapi import APIRouter
from app.api import health, projects, suggestions

api_router = APIRouter()

# Include all sub-routers
api_router.include_router(health.router)
api_router.include_router(projects.router)
api_router.include_router(suggestions.router)
