from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field
from typing import List

from app.api.dependencies import get_suggestion_service
from app.middleware.auth import get_current_user_id
from app.models import InputKind, ProjectIdea, SkillProfile
from app.services.suggestions import SuggestionError, SuggestionService

router = APIRouter(prefix="/api", tags=["suggestions"])


class SuggestProjectsRequest(BaseModel):
    profile: SkillProfile = Field(default_factory=SkillProfile)


class GenerateIdeasRequest(BaseModel):
    input: str = Field(min_length=1)
    profile: SkillProfile = Field(default_factory=SkillProfile)


class ParseProfileRequest(BaseModel):
    text: str = Field(min_length=1)


class ProjectIdeasResponse(BaseModel):
    projects: List[ProjectIdea]


class GeneratedIdeasResponse(BaseModel):
    projects: List[ProjectIdea]
    type: InputKind


@router.post("/suggestions/projects", response_model=ProjectIdeasResponse)
async def suggest_projects(
    request: SuggestProjectsRequest,
    user_id: str = Depends(get_current_user_id),
    service: SuggestionService = Depends(get_suggestion_service),
):
    """Suggest 3 projects for the user's profile"""
    try:
        projects = await service.suggest_projects(request.profile)
    except SuggestionError as e:
        raise HTTPException(status_code=502, detail=f"Failed to suggest projects: {str(e)}")

    return {"projects": projects}


@router.post("/suggestions/ideas", response_model=GeneratedIdeasResponse)
async def generate_project_ideas(
    request: GenerateIdeasRequest,
    user_id: str = Depends(get_current_user_id),
    service: SuggestionService = Depends(get_suggestion_service),
):
    """Turn a skill or a rough project idea into 3 concrete projects"""
    try:
        projects, kind = await service.generate_project_ideas(request.input, request.profile)
    except SuggestionError as e:
        raise HTTPException(status_code=502, detail=f"Failed to generate projects: {str(e)}")

    return {"projects": projects, "type": kind}


@router.post("/profile/parse", response_model=SkillProfile)
async def parse_profile(
    request: ParseProfileRequest,
    user_id: str = Depends(get_current_user_id),
    service: SuggestionService = Depends(get_suggestion_service),
):
    """Extract skills, preferred tech, experience and time budget from free text"""
    try:
        return await service.parse_profile(request.text)
    except SuggestionError as e:
        raise HTTPException(status_code=502, detail=f"Failed to parse profile: {str(e)}")
