"""Roadmap domain model

The roadmap document is stored and served with camelCase keys
(estimatedHours, requiredSkills, ...), which is the shape the frontend and
the generation prompt use. Python code works with the snake_case attributes.
"""
from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field, PositiveFloat, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serialised with camelCase aliases"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TaskDifficulty(str, Enum):
    """Task difficulty enum"""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class ResourceType(str, Enum):
    """Learning resource type enum"""
    ARTICLE = "article"
    VIDEO = "video"
    DOCUMENTATION = "documentation"


class Resource(CamelModel):
    """Learning resource attached to a task"""
    title: str
    url: str
    type: ResourceType

    @field_validator("type", mode="before")
    @classmethod
    def normalize_type(cls, value):
        return value.strip().lower() if isinstance(value, str) else value


class Task(CamelModel):
    """Single unit of work inside a milestone"""
    id: str
    title: str
    description: str = ""
    estimated_hours: PositiveFloat
    difficulty: TaskDifficulty
    required_skills: List[str] = Field(default_factory=list)
    resources: List[Resource] = Field(default_factory=list)
    done: bool = False
    locked: bool = True

    @field_validator("description", mode="before")
    @classmethod
    def null_description(cls, value):
        return "" if value is None else value

    @field_validator("difficulty", mode="before")
    @classmethod
    def normalize_difficulty(cls, value):
        return value.strip().lower() if isinstance(value, str) else value

    @field_validator("required_skills")
    @classmethod
    def dedupe_skills(cls, value: List[str]) -> List[str]:
        # Skills are a set; keep first-seen order for stable display
        seen = set()
        unique = []
        for skill in value:
            if skill not in seen:
                seen.add(skill)
                unique.append(skill)
        return unique


class Milestone(CamelModel):
    """Named phase of a roadmap"""
    id: str
    title: str
    description: str = ""
    estimated_hours: PositiveFloat
    tasks: List[Task] = Field(min_length=1)

    @field_validator("description", mode="before")
    @classmethod
    def null_description(cls, value):
        return "" if value is None else value


class Roadmap(CamelModel):
    """Ordered milestones of a project"""
    milestones: List[Milestone] = Field(min_length=1)


class Progress(CamelModel):
    """Completion summary derived from a roadmap"""
    completed_tasks: int = Field(0, ge=0)
    total_tasks: int = Field(0, ge=0)
    progress_percent: int = Field(0, ge=0, le=100)
