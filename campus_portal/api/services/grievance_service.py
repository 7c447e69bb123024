"""
Grievance tracker

Lists, submits and moderates grievances. Status changes are applied to the
local copy first; when the data service rejects the write the list is
reloaded from the service (or restored from the snapshot if that also fails)
and the error is re-raised.
"""

import logging
from datetime import datetime, timezone
from typing import List, Optional

from campus_portal.api.data_service import DataServiceClient
from campus_portal.core.errors import (
    DataServiceError,
    NotFoundError,
    PermissionDeniedError,
    ValidationError,
)
from campus_portal.core.models.records import Grievance, GrievanceStatus, GrievanceSubmission
from campus_portal.core.models.users import User

logger = logging.getLogger(__name__)

GRIEVANCES_TABLE = "grievances"

ALL_STATUSES = "All"


class GrievanceTracker:
    """Request-scoped view of the grievances table"""

    def __init__(self, client: DataServiceClient):
        self.client = client
        self.grievances: List[Grievance] = []

    async def refresh(self) -> List[Grievance]:
        """Reload every grievance, newest first"""
        rows = await self.client.select(GRIEVANCES_TABLE, order="created_at", ascending=False)
        self.grievances = [Grievance(**row) for row in rows]
        return self.grievances

    def filtered(self, status: Optional[str] = None) -> List[Grievance]:
        """Grievances in a given status; None or 'All' returns everything"""
        if status is None or status == ALL_STATUSES:
            return list(self.grievances)
        status = _parse_status(status)
        return [g for g in self.grievances if g.status == status.value]

    async def submit(self, form: GrievanceSubmission, now: Optional[datetime] = None) -> List[Grievance]:
        """
        File a new grievance and reload the list

        New grievances start Submitted with no votes, dated today.
        """
        now = now or datetime.now(timezone.utc)
        row = form.model_dump()
        row.update(
            status=GrievanceStatus.SUBMITTED.value,
            date=now.date().isoformat(),
            votes=0,
            created_at=now.isoformat(),
        )
        await self.client.insert(GRIEVANCES_TABLE, [row])
        logger.info("Grievance submitted: %s (%s)", form.title, form.priority)
        return await self.refresh()

    async def update_status(self, actor: User, grievance_id: str, status: str) -> Grievance:
        """
        Move a grievance to a new status (Authority/Admin only)

        Raises:
            PermissionDeniedError: actor cannot moderate grievances
            ValidationError: unknown status
            NotFoundError: no grievance with that id
            DataServiceError: write failed; local copy has been reverted
        """
        if not actor.is_moderator:
            raise PermissionDeniedError(f"{actor.role} cannot change grievance status")
        new_status = _parse_status(status)

        snapshot = list(self.grievances)
        self.grievances = [
            g.model_copy(update={"status": new_status.value}) if g.id == grievance_id else g
            for g in self.grievances
        ]

        try:
            rows = await self.client.update(
                GRIEVANCES_TABLE,
                {"status": new_status.value},
                [("id", "eq", grievance_id)],
            )
        except DataServiceError:
            logger.error("Failed to update status of grievance %s, reverting", grievance_id)
            await self._revert(snapshot)
            raise

        if not rows:
            self.grievances = snapshot
            raise NotFoundError(f"Grievance {grievance_id} not found")

        updated = Grievance(**rows[0])
        logger.info("Grievance %s moved to %s by %s", grievance_id, new_status.value, actor.name)
        return updated

    async def _revert(self, snapshot: List[Grievance]) -> None:
        try:
            await self.refresh()
        except DataServiceError:
            logger.warning("Reload after failed update also failed, restoring local snapshot")
            self.grievances = snapshot


def _parse_status(status: str) -> GrievanceStatus:
    try:
        return GrievanceStatus(status)
    except ValueError:
        raise ValidationError(f"Unknown grievance status: {status}")
