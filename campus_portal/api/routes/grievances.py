"""The Silent Scroll: grievance list, submission and moderation"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, Field

from campus_portal.api.data_service import DataServiceClient
from campus_portal.api.deps import get_data_client, require_view
from campus_portal.api.services.grievance_service import GrievanceTracker
from campus_portal.core.models.records import GrievanceSubmission
from campus_portal.core.models.users import User

router = APIRouter(prefix="/grievances", tags=["grievances"])


class StatusUpdate(BaseModel):
    status: str = Field(..., description="New workflow state")


@router.get("")
async def list_grievances(
    status_filter: Optional[str] = Query(None, alias="status"),
    user: User = Depends(require_view("grievances")),
    client: DataServiceClient = Depends(get_data_client),
):
    tracker = GrievanceTracker(client)
    await tracker.refresh()
    return [g.model_dump() for g in tracker.filtered(status_filter)]


@router.post("", status_code=status.HTTP_201_CREATED)
async def submit_grievance(
    form: GrievanceSubmission,
    user: User = Depends(require_view("grievances")),
    client: DataServiceClient = Depends(get_data_client),
):
    grievances = await GrievanceTracker(client).submit(form)
    return [g.model_dump() for g in grievances]


@router.patch("/{grievance_id}/status")
async def update_status(
    grievance_id: str,
    body: StatusUpdate,
    user: User = Depends(require_view("grievances")),
    client: DataServiceClient = Depends(get_data_client),
):
    tracker = GrievanceTracker(client)
    await tracker.refresh()
    updated = await tracker.update_status(user, grievance_id, body.status)
    return updated.model_dump()
