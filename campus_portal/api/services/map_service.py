"""Pathfinder's Map: campus markers, the initial view and a GeoJSON export."""

import logging
from typing import Any, Dict, List, Optional

from campus_portal.api.data_service import DataServiceClient
from campus_portal.config import PortalSettings
from campus_portal.core.models.records import MapLocation

logger = logging.getLogger(__name__)

LOCATIONS_TABLE = "map_locations"


def to_geojson(locations: List[MapLocation]) -> Dict[str, Any]:
    """FeatureCollection of point markers; coordinates are [lng, lat]"""
    return {
        "type": "FeatureCollection",
        "features": [
            {
                "type": "Feature",
                "id": location.id,
                "geometry": {"type": "Point", "coordinates": [location.lng, location.lat]},
                "properties": {
                    "name": location.name,
                    "type": location.type,
                    "description": location.description,
                },
            }
            for location in locations
        ],
    }


class CampusMap:

    def __init__(self, client: DataServiceClient, settings: PortalSettings):
        self.client = client
        self.settings = settings

    async def locations(self, location_type: Optional[str] = None) -> List[MapLocation]:
        filters = [("type", "eq", location_type)] if location_type else []
        rows = await self.client.select(LOCATIONS_TABLE, filters)
        return [MapLocation(**row) for row in rows]

    async def view(self) -> Dict[str, Any]:
        """Initial map view plus every marker"""
        locations = await self.locations()
        return {
            "center": {"lat": self.settings.map_center_lat, "lng": self.settings.map_center_lng},
            "zoom": self.settings.map_zoom,
            "locations": [location.model_dump() for location in locations],
        }

    async def geojson(self, location_type: Optional[str] = None) -> Dict[str, Any]:
        return to_geojson(await self.locations(location_type))
