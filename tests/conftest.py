"""Shared test fixtures.

Roadmaps are built from a list of task counts per milestone, with task ids
assigned globally (t1, t2, ...) and only t1 unlocked, which is exactly what
a freshly generated roadmap looks like.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, List

import pytest

from app.models import Project, Roadmap
from app.services.roadmap import compute_progress


def _task_data(number: int, locked: bool) -> Dict[str, Any]:
    return {
        "id": f"t{number}",
        "title": f"Task {number}",
        "description": f"Do step {number}",
        "estimatedHours": 2,
        "difficulty": "easy",
        "requiredSkills": ["Python"],
        "resources": [
            {"title": "Docs", "url": "https://docs.python.org/3/", "type": "documentation"}
        ],
        "done": False,
        "locked": locked,
    }


def make_roadmap_data(tasks_per_milestone: List[int]) -> Dict[str, Any]:
    """Build raw roadmap JSON (camelCase) as the model would return it."""
    milestones = []
    number = 0
    for m_index, count in enumerate(tasks_per_milestone, start=1):
        tasks = []
        for _ in range(count):
            number += 1
            tasks.append(_task_data(number, locked=number != 1))
        milestones.append({
            "id": f"m{m_index}",
            "title": f"Milestone {m_index}",
            "description": f"Phase {m_index}",
            "estimatedHours": 2 * count,
            "tasks": tasks,
        })
    return {"milestones": milestones}


@pytest.fixture()
def roadmap_data_factory():
    """Return a factory producing raw roadmap dicts."""
    return make_roadmap_data


@pytest.fixture()
def roadmap_factory():
    """Return a factory producing validated Roadmap models."""
    def _factory(tasks_per_milestone: List[int]) -> Roadmap:
        return Roadmap.model_validate(make_roadmap_data(tasks_per_milestone))
    return _factory


@pytest.fixture()
def sample_roadmap(roadmap_factory) -> Roadmap:
    """m1: [t1 unlocked, t2 locked], m2: [t3 locked, t4 locked]."""
    return roadmap_factory([2, 2])


@pytest.fixture()
def project_factory():
    """Return a factory producing stored Project models."""
    def _factory(roadmap: Roadmap, owner_id: str = "user-1", version: int = 0, **overrides) -> Project:
        data = {
            "id": "project-1",
            "owner_id": owner_id,
            "title": "Weather App",
            "description": "A small weather dashboard",
            "difficulty": "beginner",
            "estimated_time": "1-2 weeks",
            "stack": ["Python", "FastAPI"],
            "status": "active",
            "roadmap": roadmap,
            "progress": compute_progress(roadmap),
            "version": version,
            "created_at": datetime(2026, 1, 1, tzinfo=timezone.utc),
        }
        data.update(overrides)
        return Project(**data)
    return _factory
