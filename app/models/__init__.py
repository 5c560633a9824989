"""Domain models for the application"""
from .roadmap import (
    CamelModel, Task, TaskDifficulty, Resource, ResourceType, Milestone, Roadmap, Progress,
)
from .project import Project, ProjectCreate, ProjectStatus
from .profile import SkillProfile, ProjectIdea, InputKind
from .chat import ChatRequest, ChatResponse, ChatMessage, MessageRole

__all__ = [
    'CamelModel',
    'Task', 'TaskDifficulty', 'Resource', 'ResourceType',
    'Milestone', 'Roadmap', 'Progress',
    'Project', 'ProjectCreate', 'ProjectStatus',
    'SkillProfile', 'ProjectIdea', 'InputKind',
    'ChatRequest', 'ChatResponse', 'ChatMessage', 'MessageRole',
]
