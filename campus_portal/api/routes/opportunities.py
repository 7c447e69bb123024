"""Professor's Call: opportunity board"""

from fastapi import APIRouter, Depends, status

from campus_portal.api.data_service import DataServiceClient
from campus_portal.api.deps import get_data_client, require_view
from campus_portal.api.services.opportunity_service import OpportunityBoard
from campus_portal.core.models.records import OpportunityDraft
from campus_portal.core.models.users import User

router = APIRouter(prefix="/opportunities", tags=["opportunities"])

require_opportunities = require_view("opportunities")


@router.get("")
async def list_opportunities(
    user: User = Depends(require_opportunities),
    client: DataServiceClient = Depends(get_data_client),
):
    return [o.model_dump() for o in await OpportunityBoard(client).list()]


@router.post("", status_code=status.HTTP_201_CREATED)
async def publish_opportunity(
    draft: OpportunityDraft,
    user: User = Depends(require_opportunities),
    client: DataServiceClient = Depends(get_data_client),
):
    board = await OpportunityBoard(client).publish(user, draft)
    return [o.model_dump() for o in board]


@router.post("/{opportunity_id}/apply")
async def apply(
    opportunity_id: str,
    user: User = Depends(require_opportunities),
    client: DataServiceClient = Depends(get_data_client),
):
    return await OpportunityBoard(client).apply(user, opportunity_id)
