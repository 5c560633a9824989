"""Roadmap service module"""
from .errors import (
    RoadmapError,
    RoadmapGenerationFailure,
    GenerationError,
    MalformedResponseError,
    InvalidRoadmapError,
    TaskNotFoundError,
)
from .generator import RoadmapGenerator
from .progress import (
    compute_progress,
    current_milestone,
    milestone_progress,
    active_tasks,
    recently_completed_tasks,
    iter_tasks,
)
from .state_machine import toggle_task, find_task, normalize_lock_state
from .validator import validate_roadmap

__all__ = [
    "RoadmapError",
    "RoadmapGenerationFailure",
    "GenerationError",
    "MalformedResponseError",
    "InvalidRoadmapError",
    "TaskNotFoundError",
    "RoadmapGenerator",
    "compute_progress",
    "current_milestone",
    "milestone_progress",
    "active_tasks",
    "recently_completed_tasks",
    "iter_tasks",
    "toggle_task",
    "find_task",
    "normalize_lock_state",
    "validate_roadmap",
]
