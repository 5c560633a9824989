"""Project repository"""
from datetime import datetime, timezone
from typing import List, Optional

from supabase import Client  # type: ignore

from app.config import PROJECTS_TABLE
from app.models.project import Project, ProjectCreate
from app.models.roadmap import Progress, Roadmap

from .base import BaseRepository, RecordId


class ProjectRepository(BaseRepository[Project, ProjectCreate]):
    """Repository for project documents (roadmap + progress per row)"""

    def __init__(self, client: Client):
        super().__init__(client, PROJECTS_TABLE, Project)

    async def find_by_owner(self, owner_id: str) -> List[Project]:
        """Find all projects of a user, newest first"""
        return await self.find_by_filters({"owner_id": owner_id}, order_by="created_at", desc=True)

    async def update_roadmap(
        self,
        project_id: RecordId,
        roadmap: Roadmap,
        progress: Progress,
        expected_version: int,
    ) -> Optional[Project]:
        """Write roadmap and progress together if the row is still at expected_version

        Returns:
            The updated project, or None when another writer bumped the version first
        """
        payload = {
            "roadmap": self._dump(roadmap),
            "progress": self._dump(progress),
            "version": expected_version + 1,
            "updated_at": datetime.now(timezone.utc).isoformat(),
        }
        response = (
            self._client.table(self._table_name)
            .update(payload)
            .eq("id", project_id)
            .eq("version", expected_version)
            .execute()
        )

        if not response.data:
            return None

        return self._to_model(response.data[0])
