"""User skill profile and project idea models"""
from enum import Enum
from typing import List, Optional

from pydantic import Field

from .roadmap import CamelModel


class SkillProfile(CamelModel):
    """What the user already knows and how much time they have"""
    skills: List[str] = Field(default_factory=list)
    preferred_tech: List[str] = Field(default_factory=list)
    experience: str = "beginner"
    time_budget: str = "flexible"


class ProjectIdea(CamelModel):
    """A project the user may build, before a roadmap exists"""
    title: str
    description: str = ""
    difficulty: str = "beginner"
    estimated_time: Optional[str] = None
    stack: List[str] = Field(default_factory=list)


class InputKind(str, Enum):
    """How a free-text idea was interpreted"""
    SKILL = "skill"
    PROJECT = "project"
