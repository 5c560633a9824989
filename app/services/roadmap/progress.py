"""Progress aggregation over a roadmap"""
from typing import Iterator, List, Tuple

from app.models.roadmap import Milestone, Progress, Roadmap, Task


def iter_tasks(roadmap: Roadmap) -> Iterator[Tuple[Milestone, Task]]:
    """Yield (milestone, task) pairs in global task order"""
    for milestone in roadmap.milestones:
        for task in milestone.tasks:
            yield milestone, task


def progress_percent(completed: int, total: int) -> int:
    """Percentage rounded half up; 0 for an empty roadmap"""
    if total <= 0:
        return 0
    return (200 * completed + total) // (2 * total)


def compute_progress(roadmap: Roadmap) -> Progress:
    """
    Count completed and total tasks of a roadmap.

    Args:
        roadmap: Roadmap to summarise

    Returns:
        Progress with completed_tasks, total_tasks and progress_percent
    """
    total = 0
    completed = 0
    for _, task in iter_tasks(roadmap):
        total += 1
        if task.done:
            completed += 1

    return Progress(
        completed_tasks=completed,
        total_tasks=total,
        progress_percent=progress_percent(completed, total),
    )


def milestone_progress(milestone: Milestone) -> Tuple[int, int]:
    """Return (completed, total) task counts for one milestone"""
    completed = sum(1 for task in milestone.tasks if task.done)
    return completed, len(milestone.tasks)


def current_milestone(roadmap: Roadmap) -> Milestone:
    """First milestone with unfinished work, or the last one when all are done"""
    for milestone in roadmap.milestones:
        if any(not task.done for task in milestone.tasks):
            return milestone
    return roadmap.milestones[-1]


def active_tasks(roadmap: Roadmap) -> List[Tuple[Milestone, Task]]:
    """Unlocked tasks that are not done yet"""
    return [(m, t) for m, t in iter_tasks(roadmap) if not t.locked and not t.done]


def recently_completed_tasks(roadmap: Roadmap, limit: int = 5) -> List[Tuple[Milestone, Task]]:
    """The last `limit` completed tasks in global order"""
    if limit <= 0:
        return []
    done = [(m, t) for m, t in iter_tasks(roadmap) if t.done]
    return done[-limit:]
