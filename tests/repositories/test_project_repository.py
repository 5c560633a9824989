"""Unit tests for ProjectRepository against a mocked Supabase query builder."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from app.infra.supabase import client as supabase_client
from app.infra.supabase.repositories.projects import ProjectRepository
from app.models import ProjectCreate
from app.services.roadmap import compute_progress


def _row(project):
    return project.model_dump(mode="json", by_alias=True)


@pytest.fixture()
def mock_client():
    """Supabase client whose query builder methods all return the same chain."""
    client = MagicMock()
    chain = MagicMock()
    client.table.return_value = chain
    for method in ("select", "insert", "update", "eq", "order", "limit"):
        getattr(chain, method).return_value = chain
    return client


@pytest.fixture()
def chain(mock_client):
    return mock_client.table.return_value


@pytest.fixture()
def repo(mock_client):
    return ProjectRepository(mock_client)


@pytest.mark.asyncio
async def test_create_writes_camel_case_roadmap(repo, mock_client, chain, sample_roadmap, project_factory):
    chain.execute.return_value = MagicMock(data=[_row(project_factory(sample_roadmap))])
    create = ProjectCreate(
        owner_id="user-1",
        title="Weather App",
        roadmap=sample_roadmap,
        progress=compute_progress(sample_roadmap),
    )

    project = await repo.create(create)

    mock_client.table.assert_called_with("projects")
    payload = chain.insert.call_args.args[0]
    assert payload["owner_id"] == "user-1"
    assert payload["version"] == 0
    assert payload["progress"] == {"completedTasks": 0, "totalTasks": 4, "progressPercent": 0}
    assert "estimatedHours" in payload["roadmap"]["milestones"][0]["tasks"][0]
    assert project.roadmap == sample_roadmap


@pytest.mark.asyncio
async def test_find_by_id_returns_none_when_missing(repo, chain):
    chain.execute.return_value = MagicMock(data=[])

    assert await repo.find_by_id("nope") is None


@pytest.mark.asyncio
async def test_find_by_owner_orders_newest_first(repo, chain, sample_roadmap, project_factory):
    chain.execute.return_value = MagicMock(data=[_row(project_factory(sample_roadmap))])

    projects = await repo.find_by_owner("user-1")

    assert len(projects) == 1
    chain.eq.assert_called_with("owner_id", "user-1")
    chain.order.assert_called_with("created_at", desc=True)


@pytest.mark.asyncio
async def test_update_roadmap_is_conditional_on_version(repo, chain, sample_roadmap, project_factory):
    chain.execute.return_value = MagicMock(data=[_row(project_factory(sample_roadmap, version=8))])
    progress = compute_progress(sample_roadmap)

    project = await repo.update_roadmap("project-1", sample_roadmap, progress, expected_version=7)

    payload = chain.update.call_args.args[0]
    assert payload["version"] == 8
    assert payload["progress"]["totalTasks"] == 4
    assert "updated_at" in payload
    eq_calls = [c.args for c in chain.eq.call_args_list]
    assert ("id", "project-1") in eq_calls
    assert ("version", 7) in eq_calls
    assert project.version == 8


@pytest.mark.asyncio
async def test_update_roadmap_returns_none_on_conflict(repo, chain, sample_roadmap):
    chain.execute.return_value = MagicMock(data=[])

    result = await repo.update_roadmap(
        "project-1", sample_roadmap, compute_progress(sample_roadmap), expected_version=7
    )

    assert result is None


@pytest.mark.asyncio
async def test_find_by_filters_applies_limit(repo, chain, sample_roadmap, project_factory):
    chain.execute.return_value = MagicMock(data=[_row(project_factory(sample_roadmap))])

    await repo.find_by_filters({"owner_id": "user-1"}, limit=1)

    chain.limit.assert_called_once_with(1)
    chain.order.assert_not_called()


def test_client_requires_supabase_settings(monkeypatch):
    monkeypatch.setattr(supabase_client, "_supabase_client", None)
    monkeypatch.setattr(supabase_client, "SUPABASE_URL", None)

    with pytest.raises(ValueError):
        supabase_client.get_supabase_client()


def test_client_is_created_once(monkeypatch):
    create_client = MagicMock(return_value=MagicMock())
    monkeypatch.setattr(supabase_client, "_supabase_client", None)
    monkeypatch.setattr(supabase_client, "SUPABASE_URL", "https://example.supabase.co")
    monkeypatch.setattr(supabase_client, "SUPABASE_SERVICE_ROLE_KEY", "service-key")
    monkeypatch.setattr(supabase_client, "create_client", create_client)

    first = supabase_client.get_supabase_client()

    assert supabase_client.get_supabase_client() is first
    create_client.assert_called_once_with("https://example.supabase.co", "service-key")
