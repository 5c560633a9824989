"""Repository exports"""
from .base import BaseRepository
from .projects import ProjectRepository

__all__ = [
    'BaseRepository',
    'ProjectRepository',
]
