"""Task unlock state machine

Completing a task unlocks the next locked, unfinished task after it in
global order. Un-completing only clears `done`; tasks never re-lock.
"""
import logging

from app.models.roadmap import Roadmap, Task
from .errors import TaskNotFoundError
from .progress import iter_tasks

logger = logging.getLogger(__name__)


def find_task(roadmap: Roadmap, milestone_id: str, task_id: str) -> Task:
    """Return the task identified by milestone_id/task_id or raise TaskNotFoundError"""
    for milestone, task in iter_tasks(roadmap):
        if milestone.id == milestone_id and task.id == task_id:
            return task
    raise TaskNotFoundError(milestone_id, task_id)


def toggle_task(roadmap: Roadmap, milestone_id: str, task_id: str) -> Roadmap:
    """
    Flip a task's done flag and unlock its successor on completion.

    The input roadmap is never modified.

    Args:
        roadmap: Current roadmap
        milestone_id: Milestone containing the task
        task_id: Task to toggle

    Returns:
        New roadmap. Equal to the input when the task is locked.

    Raises:
        TaskNotFoundError: If the task does not exist in that milestone
    """
    if find_task(roadmap, milestone_id, task_id).locked:
        logger.info(f"Ignoring toggle of locked task {milestone_id}/{task_id}")
        return roadmap.model_copy(deep=True)

    updated = roadmap.model_copy(deep=True)
    ordered = list(iter_tasks(updated))
    position = next(
        i for i, (m, t) in enumerate(ordered) if m.id == milestone_id and t.id == task_id
    )

    task = ordered[position][1]
    task.done = not task.done

    if not task.done:
        return updated

    for _, later in ordered[position + 1:]:
        if later.locked and not later.done:
            later.locked = False
            logger.info(f"Completed {task.id}, unlocked {later.id}")
            break

    return updated


def normalize_lock_state(roadmap: Roadmap) -> Roadmap:
    """Reset a freshly generated roadmap: nothing done, only the first task unlocked"""
    normalized = roadmap.model_copy(deep=True)
    for _, task in iter_tasks(normalized):
        task.done = False
        task.locked = True
    normalized.milestones[0].tasks[0].locked = False
    return normalized
