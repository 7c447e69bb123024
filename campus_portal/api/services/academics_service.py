"""
Academics screen: courses with attendance, the resource vault, upcoming
assignments and the target-grade predictor.
"""

import logging
from typing import Any, Dict, List, Optional

from campus_portal.api.data_service import DataServiceClient
from campus_portal.core.calculators.attendance import AttendanceSummary, summarize_course
from campus_portal.core.calculators.projection import TargetGradeProjector
from campus_portal.core.errors import PermissionDeniedError
from campus_portal.core.models.projection import ProjectionResult
from campus_portal.core.models.records import Assignment, Course, Resource, ResourceUpload
from campus_portal.core.models.users import User

logger = logging.getLogger(__name__)

COURSES_TABLE = "courses"
RESOURCES_TABLE = "resources"
ASSIGNMENTS_TABLE = "assignments"

# Uploads are catalogued only; file storage is not wired up
PLACEHOLDER_SIZE = "1.2 MB"
PLACEHOLDER_URL = "#"

UPCOMING_LIMIT = 3


class AcademicsService:
    """Reads and writes for the academics screen"""

    def __init__(self, client: DataServiceClient, projector: Optional[TargetGradeProjector] = None):
        self.client = client
        self.projector = projector or TargetGradeProjector()

    async def courses(self) -> List[AttendanceSummary]:
        rows = await self.client.select(COURSES_TABLE)
        return [summarize_course(Course(**row)) for row in rows]

    async def resources(self) -> List[Resource]:
        rows = await self.client.select(RESOURCES_TABLE)
        return [Resource(**row) for row in rows]

    async def upload_resource(self, actor: User, upload: ResourceUpload) -> List[Resource]:
        """
        Catalogue a resource in the vault (Faculty only)

        Returns:
            The refreshed resource list
        """
        if not actor.is_faculty:
            raise PermissionDeniedError("Only faculty can upload resources")

        row = {
            "title": upload.title,
            "type": upload.type,
            "size": PLACEHOLDER_SIZE,
            "uploaded_by": actor.name,
            "url": PLACEHOLDER_URL,
        }
        await self.client.insert(RESOURCES_TABLE, [row])
        logger.info("Resource '%s' uploaded by %s", upload.title, actor.name)
        return await self.resources()

    async def assignments(self) -> List[Assignment]:
        """All assignments, soonest due first"""
        rows = await self.client.select(ASSIGNMENTS_TABLE, order="due_date", ascending=True)
        return [Assignment(**row) for row in rows]

    async def upcoming_assignments(self, limit: int = UPCOMING_LIMIT) -> List[Assignment]:
        return (await self.assignments())[:limit]

    def project(
        self,
        current_average: float,
        credits_completed: int,
        credits_planned: int,
        target_average: float,
    ) -> ProjectionResult:
        return self.projector.project(current_average, credits_completed, credits_planned, target_average)

    async def overview(self, actor: User) -> Dict[str, Any]:
        """Everything the academics screen shows for a user"""
        predictor = None
        if self.projector.is_offered_to(actor):
            inputs = self.projector.defaults_for(actor)
            result = self.projector.project(**inputs.model_dump())
            predictor = {"inputs": inputs.model_dump(), "result": result.to_payload()}

        return {
            "courses": [c.model_dump() for c in await self.courses()],
            "resources": [r.model_dump() for r in await self.resources()],
            "upcoming_assignments": [a.model_dump() for a in await self.upcoming_assignments()],
            "predictor": predictor,
        }
