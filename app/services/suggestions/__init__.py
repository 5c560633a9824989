"""Project suggestion service module"""
from .suggestion_service import SuggestionService, SuggestionError

__all__ = [
    "SuggestionService",
    "SuggestionError",
]
