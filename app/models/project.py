"""Project domain model"""
from datetime import datetime
from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

from .roadmap import Progress, Roadmap


class ProjectStatus(str, Enum):
    """Project status enum"""
    ACTIVE = "active"


class ProjectBase(BaseModel):
    """Base project fields"""
    title: str
    description: Optional[str] = None
    difficulty: Optional[str] = None
    estimated_time: Optional[str] = None
    stack: List[str] = Field(default_factory=list)
    status: str = ProjectStatus.ACTIVE.value


class ProjectCreate(ProjectBase):
    """Project creation model"""
    owner_id: str  # UUID as string
    roadmap: Roadmap
    progress: Progress
    version: int = 0


class Project(ProjectBase):
    """Complete project model from database"""
    id: str  # UUID as string
    owner_id: str
    roadmap: Roadmap
    progress: Progress
    version: int = 0
    created_at: datetime
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)

    @property
    def is_completed(self) -> bool:
        return self.progress.progress_percent >= 100
