"""High Command dashboard"""

from fastapi import APIRouter, Depends

from campus_portal.api.data_service import DataServiceClient
from campus_portal.api.deps import get_data_client, require_view
from campus_portal.api.services.dashboard_service import DashboardService

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("", dependencies=[Depends(require_view("dashboard"))])
async def dashboard(client: DataServiceClient = Depends(get_data_client)):
    return await DashboardService(client).overview()
