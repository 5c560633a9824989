"""Roadmap error taxonomy

Generation failures carry the stage that failed (request, parse, validate)
so callers can report them separately and decide whether to retry.
"""
from typing import Optional


class RoadmapError(Exception):
    """Base class for roadmap errors"""


class RoadmapGenerationFailure(RoadmapError):
    """A roadmap could not be produced from the model"""
    stage: str = "unknown"


class GenerationError(RoadmapGenerationFailure):
    """The model call failed, timed out or returned no text"""
    stage = "request"


class MalformedResponseError(RoadmapGenerationFailure):
    """The model text is not valid JSON"""
    stage = "parse"


class InvalidRoadmapError(RoadmapGenerationFailure):
    """Parsed JSON violates a roadmap invariant"""
    stage = "validate"

    def __init__(self, invariant: str, message: str, detail: Optional[str] = None):
        super().__init__(message)
        self.invariant = invariant
        self.detail = detail


class TaskNotFoundError(RoadmapError):
    """The referenced milestone/task pair does not exist"""

    def __init__(self, milestone_id: str, task_id: str):
        super().__init__(f"Task {task_id} not found in milestone {milestone_id}")
        self.milestone_id = milestone_id
        self.task_id = task_id
