"""Portal services: one per screen, each talking to the hosted data service."""

from .academics_service import AcademicsService
from .auth_service import AuthService
from .community_service import CommunityForum, time_ago
from .dashboard_service import DashboardService, build_activity
from .grievance_service import GrievanceTracker
from .map_service import CampusMap, to_geojson
from .opportunity_service import OpportunityBoard
from . import sos_service

__all__ = [
    "AcademicsService",
    "AuthService",
    "CommunityForum",
    "time_ago",
    "DashboardService",
    "build_activity",
    "GrievanceTracker",
    "CampusMap",
    "to_geojson",
    "OpportunityBoard",
    "sos_service",
]
