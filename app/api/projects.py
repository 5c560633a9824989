import logging
from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel, Field
from typing import List

from app.api.dependencies import get_mentor_service, get_project_service
from app.middleware.auth import get_current_user_id
from app.models import ChatRequest, ChatResponse, Project, ProjectIdea, SkillProfile
from app.services.mentor import MentorChatError, MentorService
from app.services.project_service import (
    PROJECT_FILTERS,
    ConcurrentUpdateError,
    ProjectNotFoundError,
    ProjectService,
)
from app.services.roadmap import InvalidRoadmapError, RoadmapGenerationFailure, TaskNotFoundError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/projects", tags=["projects"])


class CreateProjectRequest(BaseModel):
    project: ProjectIdea
    profile: SkillProfile = Field(default_factory=SkillProfile)


class ProjectResponse(BaseModel):
    project: Project


class ProjectListResponse(BaseModel):
    projects: List[Project]
    count: int


def _generation_error_detail(error: RoadmapGenerationFailure) -> dict:
    detail = {"stage": error.stage, "message": str(error)}
    if isinstance(error, InvalidRoadmapError):
        detail["invariant"] = error.invariant
    return detail


@router.post("", response_model=ProjectResponse)
async def create_project(
    request: CreateProjectRequest,
    user_id: str = Depends(get_current_user_id),
    service: ProjectService = Depends(get_project_service),
):
    """
    Generate a roadmap for a project idea and store the project.

    Raises:
        502: The model failed at the request, parse or validate stage
             (detail.stage says which); nothing is stored
    """
    try:
        project = await service.create_project(user_id, request.project, request.profile)
    except RoadmapGenerationFailure as e:
        logger.warning(f"Roadmap generation failed at {e.stage} stage for user {user_id}: {e}")
        raise HTTPException(status_code=502, detail=_generation_error_detail(e))

    return {"project": project}


@router.get("", response_model=ProjectListResponse)
async def list_projects(
    filter: str = Query("all", description="all, active or completed"),
    user_id: str = Depends(get_current_user_id),
    service: ProjectService = Depends(get_project_service),
):
    """List the authenticated user's projects, newest first"""
    if filter not in PROJECT_FILTERS:
        raise HTTPException(status_code=400, detail=f"filter must be one of {', '.join(PROJECT_FILTERS)}")

    projects = await service.list_projects(user_id, filter)
    return {
        "projects": projects,
        "count": len(projects)
    }


@router.get("/{project_id}", response_model=ProjectResponse)
async def get_project(
    project_id: str,
    user_id: str = Depends(get_current_user_id),
    service: ProjectService = Depends(get_project_service),
):
    """Get a single project with its roadmap and progress"""
    try:
        project = await service.get_project(project_id, user_id)
    except ProjectNotFoundError:
        raise HTTPException(status_code=404, detail="Project not found")

    return {"project": project}


@router.post(
    "/{project_id}/milestones/{milestone_id}/tasks/{task_id}/toggle",
    response_model=ProjectResponse,
)
async def toggle_task(
    project_id: str,
    milestone_id: str,
    task_id: str,
    user_id: str = Depends(get_current_user_id),
    service: ProjectService = Depends(get_project_service),
):
    """
    Check or uncheck a task.

    Completing a task unlocks the next locked task; progress is recomputed
    and stored with the roadmap. Toggling a locked task changes nothing.
    """
    try:
        project = await service.toggle_task(project_id, user_id, milestone_id, task_id)
    except ProjectNotFoundError:
        raise HTTPException(status_code=404, detail="Project not found")
    except TaskNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ConcurrentUpdateError as e:
        raise HTTPException(status_code=409, detail=str(e))

    return {"project": project}


@router.post("/{project_id}/chat", response_model=ChatResponse)
async def chat_with_mentor(
    project_id: str,
    request: ChatRequest,
    user_id: str = Depends(get_current_user_id),
    service: ProjectService = Depends(get_project_service),
    mentor: MentorService = Depends(get_mentor_service),
):
    """Ask the AI mentor about the project's current milestone"""
    try:
        project = await service.get_project(project_id, user_id)
    except ProjectNotFoundError:
        raise HTTPException(status_code=404, detail="Project not found")

    try:
        reply = await mentor.reply(project, request.message, request.history)
    except MentorChatError as e:
        raise HTTPException(status_code=502, detail=str(e))

    return {"response": reply}
