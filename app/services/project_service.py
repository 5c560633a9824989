"""
Project Service

Handles business logic for projects including:
- Creating a project from an AI-generated roadmap
- Reading and filtering a user's projects
- Toggling tasks with an optimistic version check so that concurrent
  toggles on the same project never lose an update
"""

import logging
from typing import List, Optional

from app.config import TOGGLE_MAX_ATTEMPTS
from app.infra.supabase.repositories.projects import ProjectRepository
from app.models.profile import ProjectIdea, SkillProfile
from app.models.project import Project, ProjectCreate, ProjectStatus
from app.services.roadmap import RoadmapGenerator, compute_progress, toggle_task

logger = logging.getLogger(__name__)


# Dashboard filters
FILTER_ALL = "all"
FILTER_ACTIVE = "active"
FILTER_COMPLETED = "completed"
PROJECT_FILTERS = (FILTER_ALL, FILTER_ACTIVE, FILTER_COMPLETED)


class ProjectNotFoundError(Exception):
    """Project does not exist or belongs to another user"""


class ConcurrentUpdateError(Exception):
    """The project kept changing underneath a toggle"""


class ProjectService:
    """Service for managing projects and their roadmaps"""

    def __init__(
        self,
        project_repo: ProjectRepository,
        generator: Optional[RoadmapGenerator] = None,
        max_attempts: int = TOGGLE_MAX_ATTEMPTS,
    ):
        self.project_repo = project_repo
        self.generator = generator or RoadmapGenerator()
        self.max_attempts = max_attempts

    async def create_project(self, owner_id: str, idea: ProjectIdea, profile: SkillProfile) -> Project:
        """
        Generate a roadmap for an idea and store it as a new project.

        Nothing is stored when generation fails; the generator's errors
        propagate unchanged.

        Args:
            owner_id: The user creating the project
            idea: Project title, description, difficulty, stack
            profile: The user's skill profile used for the prompt

        Returns:
            The stored project
        """
        roadmap = await self.generator.generate_roadmap(idea, profile)
        progress = compute_progress(roadmap)

        project_create = ProjectCreate(
            owner_id=owner_id,
            title=idea.title,
            description=idea.description,
            difficulty=idea.difficulty,
            estimated_time=idea.estimated_time,
            stack=idea.stack,
            status=ProjectStatus.ACTIVE.value,
            roadmap=roadmap,
            progress=progress,
            version=0,
        )
        project = await self.project_repo.create(project_create)
        logger.info(
            f"Created project {project.id} for user {owner_id} with {progress.total_tasks} tasks"
        )
        return project

    async def get_project(self, project_id: str, owner_id: str) -> Project:
        """
        Get a project owned by the given user.

        Raises:
            ProjectNotFoundError: If the project is missing or owned by someone else
        """
        project = await self.project_repo.find_by_id(project_id)
        if project is None or project.owner_id != owner_id:
            raise ProjectNotFoundError(f"Project {project_id} not found")
        return project

    async def list_projects(self, owner_id: str, status_filter: str = FILTER_ALL) -> List[Project]:
        """
        List a user's projects, newest first.

        Args:
            owner_id: The user ID
            status_filter: "all", "active" (active and not finished) or "completed"
        """
        if status_filter not in PROJECT_FILTERS:
            raise ValueError(f"Unknown project filter: {status_filter}")

        projects = await self.project_repo.find_by_owner(owner_id)

        if status_filter == FILTER_ACTIVE:
            return [
                p for p in projects
                if p.status == ProjectStatus.ACTIVE.value and not p.is_completed
            ]
        if status_filter == FILTER_COMPLETED:
            return [p for p in projects if p.is_completed]
        return projects

    async def toggle_task(self, project_id: str, owner_id: str, milestone_id: str, task_id: str) -> Project:
        """
        Toggle a task and persist the new roadmap and progress together.

        The write only succeeds if the stored version is still the one that
        was read; otherwise the project is re-read and the toggle recomputed.

        Returns:
            The project after the toggle. Toggling a locked task writes nothing.

        Raises:
            ProjectNotFoundError: If the project is missing or not owned by the user
            TaskNotFoundError: If the milestone/task pair does not exist
            ConcurrentUpdateError: If every attempt lost the race
        """
        for attempt in range(1, self.max_attempts + 1):
            project = await self.get_project(project_id, owner_id)

            roadmap = toggle_task(project.roadmap, milestone_id, task_id)
            if roadmap == project.roadmap:
                return project

            progress = compute_progress(roadmap)
            updated = await self.project_repo.update_roadmap(
                project.id, roadmap, progress, expected_version=project.version
            )
            if updated is not None:
                logger.info(
                    f"Toggled {milestone_id}/{task_id} on project {project_id}: "
                    f"{progress.completed_tasks}/{progress.total_tasks} ({progress.progress_percent}%)"
                )
                return updated

            logger.warning(
                f"Version conflict toggling {task_id} on project {project_id} "
                f"(attempt {attempt}/{self.max_attempts})"
            )

        raise ConcurrentUpdateError(
            f"Project {project_id} was modified concurrently; gave up after {self.max_attempts} attempts"
        )
