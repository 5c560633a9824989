"""Unit tests for the roadmap validator."""

from __future__ import annotations

import pytest

from app.models import ResourceType, TaskDifficulty
from app.services.roadmap import InvalidRoadmapError, validate_roadmap


def _invariant(data) -> str:
    with pytest.raises(InvalidRoadmapError) as exc_info:
        validate_roadmap(data)
    assert exc_info.value.stage == "validate"
    return exc_info.value.invariant


# ---------------------------------------------------------------------------
# Accepted input
# ---------------------------------------------------------------------------


def test_valid_roadmap_is_accepted(roadmap_data_factory):
    roadmap = validate_roadmap(roadmap_data_factory([2, 3]))

    assert [m.id for m in roadmap.milestones] == ["m1", "m2"]
    task = roadmap.milestones[1].tasks[0]
    assert task.id == "t3"
    assert task.estimated_hours == 2
    assert task.difficulty == TaskDifficulty.EASY
    assert task.resources[0].type == ResourceType.DOCUMENTATION


def test_enum_values_are_case_insensitive(roadmap_data_factory):
    data = roadmap_data_factory([1])
    task = data["milestones"][0]["tasks"][0]
    task["difficulty"] = "Medium"
    task["resources"][0]["type"] = "VIDEO"

    roadmap = validate_roadmap(data)

    assert roadmap.milestones[0].tasks[0].difficulty == TaskDifficulty.MEDIUM
    assert roadmap.milestones[0].tasks[0].resources[0].type == ResourceType.VIDEO


def test_required_skills_are_deduplicated(roadmap_data_factory):
    data = roadmap_data_factory([1])
    data["milestones"][0]["tasks"][0]["requiredSkills"] = ["SQL", "Python", "SQL"]

    roadmap = validate_roadmap(data)

    assert roadmap.milestones[0].tasks[0].required_skills == ["SQL", "Python"]


def test_dump_uses_camel_case_keys(roadmap_data_factory):
    roadmap = validate_roadmap(roadmap_data_factory([1]))

    dumped = roadmap.model_dump(mode="json", by_alias=True)

    task = dumped["milestones"][0]["tasks"][0]
    assert "estimatedHours" in task
    assert "requiredSkills" in task


# ---------------------------------------------------------------------------
# Named invariant violations
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("data", [None, [], "roadmap", {"phases": []}])
def test_missing_milestones(data):
    assert _invariant(data) == "missing_milestones"


def test_empty_milestones_rejected():
    assert _invariant({"milestones": []}) == "empty_milestones"


def test_non_list_milestones_rejected():
    assert _invariant({"milestones": {"m1": {}}}) == "empty_milestones"


def test_milestone_without_tasks_rejected(roadmap_data_factory):
    data = roadmap_data_factory([2, 1])
    data["milestones"][1]["tasks"] = []

    assert _invariant(data) == "empty_milestone"


def test_milestone_missing_tasks_key_rejected(roadmap_data_factory):
    data = roadmap_data_factory([2, 1])
    del data["milestones"][0]["tasks"]

    assert _invariant(data) == "empty_milestone"


def test_duplicate_task_ids_rejected(roadmap_data_factory):
    data = roadmap_data_factory([2, 2])
    data["milestones"][1]["tasks"][0]["id"] = "t1"

    assert _invariant(data) == "duplicate_task_ids"


def test_task_ids_restarting_per_milestone_rejected(roadmap_data_factory):
    data = roadmap_data_factory([2, 2])
    data["milestones"][1]["tasks"][0]["id"] = "t1"
    data["milestones"][1]["tasks"][1]["id"] = "t2"

    assert _invariant(data) == "duplicate_task_ids"


def test_non_sequential_task_ids_rejected(roadmap_data_factory):
    data = roadmap_data_factory([2, 2])
    data["milestones"][1]["tasks"][1]["id"] = "t7"

    with pytest.raises(InvalidRoadmapError) as exc_info:
        validate_roadmap(data)
    assert exc_info.value.invariant == "non_sequential_task_ids"
    assert "t7" in exc_info.value.detail


def test_duplicate_milestone_ids_rejected(roadmap_data_factory):
    data = roadmap_data_factory([1, 1])
    data["milestones"][1]["id"] = "m1"

    assert _invariant(data) == "duplicate_milestone_ids"


@pytest.mark.parametrize(
    "field, value",
    [
        ("difficulty", "impossible"),
        ("estimatedHours", 0),
        ("estimatedHours", -3),
        ("title", None),
    ],
)
def test_schema_violations_rejected(roadmap_data_factory, field, value):
    data = roadmap_data_factory([2])
    data["milestones"][0]["tasks"][1][field] = value

    assert _invariant(data) == "schema"


def test_bad_resource_type_rejected(roadmap_data_factory):
    data = roadmap_data_factory([1])
    data["milestones"][0]["tasks"][0]["resources"][0]["type"] = "podcast"

    assert _invariant(data) == "schema"


@pytest.mark.parametrize("bad_id", [None, 3, ""])
def test_milestones_without_string_ids_are_schema_errors(roadmap_data_factory, bad_id):
    data = roadmap_data_factory([1, 1])
    for milestone in data["milestones"]:
        if bad_id is None:
            del milestone["id"]
        else:
            milestone["id"] = bad_id

    assert _invariant(data) == "schema"


def test_task_without_id_is_schema_error(roadmap_data_factory):
    data = roadmap_data_factory([2])
    del data["milestones"][0]["tasks"][1]["id"]

    assert _invariant(data) == "schema"


def test_non_sequential_milestone_ids_rejected(roadmap_data_factory):
    data = roadmap_data_factory([1, 1])
    data["milestones"][1]["id"] = "m3"

    with pytest.raises(InvalidRoadmapError) as exc_info:
        validate_roadmap(data)
    assert exc_info.value.invariant == "non_sequential_milestone_ids"
    assert "m3" in exc_info.value.detail


def test_null_descriptions_become_empty(roadmap_data_factory):
    data = roadmap_data_factory([1])
    data["milestones"][0]["description"] = None
    data["milestones"][0]["tasks"][0]["description"] = None

    roadmap = validate_roadmap(data)

    assert roadmap.milestones[0].description == ""
    assert roadmap.milestones[0].tasks[0].description == ""
