"""
NAVIGATION - Role-gated portal views

Each view is listed with the roles that may open it. The dashboard is open
to everyone and is the fallback for unknown or forbidden views.
"""

from dataclasses import dataclass
from typing import List, Tuple

from campus_portal.core.models.users import UserRole

ALL_ROLES = (UserRole.STUDENT, UserRole.FACULTY, UserRole.AUTHORITY, UserRole.ADMIN)

DEFAULT_VIEW = "dashboard"


@dataclass(frozen=True)
class NavItem:
    """Sidebar entry"""
    id: str
    label: str
    roles: Tuple[UserRole, ...]

    def allows(self, role) -> bool:
        # Tuple membership compares by value, so plain role strings match too
        return role in self.roles


NAV_ITEMS: Tuple[NavItem, ...] = (
    NavItem("dashboard", "High Command", ALL_ROLES),
    NavItem("grievances", "The Silent Scroll", (UserRole.STUDENT, UserRole.ADMIN, UserRole.AUTHORITY)),
    NavItem("academics", "Destiny Manager", (UserRole.STUDENT, UserRole.FACULTY)),
    NavItem("opportunities", "Professor's Call", (UserRole.STUDENT, UserRole.FACULTY)),
    NavItem("map", "Pathfinder's Map", (UserRole.STUDENT, UserRole.FACULTY, UserRole.ADMIN)),
    NavItem("community", "Hall of Echoes", ALL_ROLES),
)

_NAV_BY_ID = {item.id: item for item in NAV_ITEMS}


def nav_for_role(role) -> List[NavItem]:
    """Sidebar entries visible to a role, in display order"""
    return [item for item in NAV_ITEMS if item.allows(role)]


def can_view(role, view_id: str) -> bool:
    item = _NAV_BY_ID.get(view_id)
    return item is not None and item.allows(role)


def resolve_view(role, view_id: str) -> str:
    """Requested view if the role may open it, otherwise the dashboard"""
    return view_id if can_view(role, view_id) else DEFAULT_VIEW


__all__ = ["ALL_ROLES", "DEFAULT_VIEW", "NavItem", "NAV_ITEMS", "nav_for_role", "can_view", "resolve_view"]
