"""Pathfinder's Map"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from campus_portal.api.data_service import DataServiceClient
from campus_portal.api.deps import get_data_client, require_view
from campus_portal.api.services.map_service import CampusMap
from campus_portal.config import PortalSettings, get_settings
from campus_portal.core.models.users import User

router = APIRouter(prefix="/map", tags=["map"])

require_map = require_view("map")


def _campus_map(
    client: DataServiceClient = Depends(get_data_client),
    settings: PortalSettings = Depends(get_settings),
) -> CampusMap:
    return CampusMap(client, settings)


@router.get("")
async def map_view(user: User = Depends(require_map), campus_map: CampusMap = Depends(_campus_map)):
    return await campus_map.view()


@router.get("/locations")
async def locations(
    location_type: Optional[str] = Query(None, alias="type"),
    user: User = Depends(require_map),
    campus_map: CampusMap = Depends(_campus_map),
):
    return [loc.model_dump() for loc in await campus_map.locations(location_type)]


@router.get("/geojson")
async def geojson(
    location_type: Optional[str] = Query(None, alias="type"),
    user: User = Depends(require_map),
    campus_map: CampusMap = Depends(_campus_map),
):
    return await campus_map.geojson(location_type)
