"""Roadmap validator

Turns an untyped JSON value (usually parsed model output) into a Roadmap,
or raises InvalidRoadmapError naming the invariant that does not hold.
Structural checks run before the pydantic schema so that the common model
mistakes get a precise invariant name instead of a generic schema error.
"""
import logging
from typing import Any, List

from pydantic import ValidationError

from app.models.roadmap import Roadmap
from .errors import InvalidRoadmapError

logger = logging.getLogger(__name__)


MISSING_MILESTONES = "missing_milestones"
EMPTY_MILESTONES = "empty_milestones"
EMPTY_MILESTONE = "empty_milestone"
DUPLICATE_MILESTONE_IDS = "duplicate_milestone_ids"
DUPLICATE_TASK_IDS = "duplicate_task_ids"
NON_SEQUENTIAL_MILESTONE_IDS = "non_sequential_milestone_ids"
NON_SEQUENTIAL_TASK_IDS = "non_sequential_task_ids"
SCHEMA = "schema"


def _require_id(item: dict, label: str) -> str:
    item_id = item.get("id")
    if not isinstance(item_id, str) or not item_id.strip():
        raise InvalidRoadmapError(SCHEMA, f"{label} has a missing or non-string id", detail=f"got {item_id!r}")
    return item_id


def validate_roadmap(data: Any) -> Roadmap:
    """
    Validate a parsed JSON value as a roadmap.

    Args:
        data: Any JSON-compatible value

    Returns:
        Roadmap model

    Raises:
        InvalidRoadmapError: with the violated invariant name
    """
    if not isinstance(data, dict) or "milestones" not in data:
        raise InvalidRoadmapError(MISSING_MILESTONES, "Roadmap has no 'milestones' field")

    milestones = data["milestones"]
    if not isinstance(milestones, list) or not milestones:
        raise InvalidRoadmapError(EMPTY_MILESTONES, "Roadmap must contain at least one milestone")

    milestone_ids: List[str] = []
    task_ids: List[str] = []
    for index, milestone in enumerate(milestones):
        if not isinstance(milestone, dict):
            raise InvalidRoadmapError(SCHEMA, f"Milestone at position {index} is not an object")

        milestone_ids.append(_require_id(milestone, f"Milestone at position {index}"))
        tasks = milestone.get("tasks")
        if not isinstance(tasks, list) or not tasks:
            raise InvalidRoadmapError(
                EMPTY_MILESTONE,
                f"Milestone {milestone.get('id', index)} has no tasks",
            )

        for task in tasks:
            if not isinstance(task, dict):
                raise InvalidRoadmapError(
                    SCHEMA, f"Milestone {milestone.get('id', index)} contains a non-object task"
                )
            task_ids.append(_require_id(task, f"A task in milestone {milestone_ids[-1]}"))

    if len(set(milestone_ids)) != len(milestone_ids):
        raise InvalidRoadmapError(DUPLICATE_MILESTONE_IDS, "Milestone ids must be unique")

    if len(set(task_ids)) != len(task_ids):
        raise InvalidRoadmapError(DUPLICATE_TASK_IDS, "Task ids must be unique")

    expected_milestone_ids = [f"m{n}" for n in range(1, len(milestone_ids) + 1)]
    if milestone_ids != expected_milestone_ids:
        raise InvalidRoadmapError(
            NON_SEQUENTIAL_MILESTONE_IDS,
            "Milestone ids must run m1..mN in order",
            detail=f"got {milestone_ids}",
        )

    expected_ids = [f"t{n}" for n in range(1, len(task_ids) + 1)]
    if task_ids != expected_ids:
        raise InvalidRoadmapError(
            NON_SEQUENTIAL_TASK_IDS,
            "Task ids must run t1..tN in milestone order",
            detail=f"got {task_ids}",
        )

    try:
        roadmap = Roadmap.model_validate(data)
    except ValidationError as e:
        logger.warning(f"Roadmap failed schema validation: {e.error_count()} errors")
        raise InvalidRoadmapError(SCHEMA, "Roadmap does not match the schema", detail=str(e)) from e

    return roadmap
