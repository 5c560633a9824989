"""Service providers for the API routers (overridable in tests)"""
from app.infra.supabase.client import get_supabase_client
from app.infra.supabase.repositories.projects import ProjectRepository
from app.services.mentor import MentorService
from app.services.project_service import ProjectService
from app.services.suggestions import SuggestionService


def get_project_service() -> ProjectService:
    return ProjectService(ProjectRepository(get_supabase_client()))


def get_mentor_service() -> MentorService:
    return MentorService()


def get_suggestion_service() -> SuggestionService:
    return SuggestionService()
