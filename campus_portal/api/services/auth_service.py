"""
Login stub: one-click sign-in by role.

There are no credentials. Signing in picks the first profile holding the
requested role, seeding one on first run.
"""

import logging
from typing import Optional

from campus_portal.api.data_service import DataServiceClient
from campus_portal.core.errors import DataServiceError
from campus_portal.core.models.users import User, UserRole

logger = logging.getLogger(__name__)

PROFILES_TABLE = "profiles"

# (name, email) for profiles seeded on first login
SEED_PROFILES = {
    UserRole.FACULTY: ("Dr. A. Sharma", "prof@iitmandi.ac.in"),
    UserRole.ADMIN: ("Chief Warden", "admin@iitmandi.ac.in"),
}
DEFAULT_SEED_PROFILE = ("Arjun Mehta", "b22100@students.iitmandi.ac.in")

AVATAR_URL = "https://ui-avatars.com/api/?name={role}&background=0ea5e9&color=fff"


def seed_profile(role: UserRole) -> dict:
    """Profile row created when no profile exists for a role yet"""
    role = UserRole(role)
    name, email = SEED_PROFILES.get(role, DEFAULT_SEED_PROFILE)
    return {
        "name": name,
        "email": email,
        "role": role.value,
        "avatar": AVATAR_URL.format(role=role.value),
    }


class AuthService:
    """Role-selection login against the profiles table"""

    def __init__(self, client: DataServiceClient):
        self.client = client

    async def login(self, role: UserRole) -> User:
        """
        Sign in as the first profile with the given role

        Args:
            role: Selected access level

        Returns:
            Existing profile, or a freshly seeded one on first run
        """
        role = UserRole(role)
        existing = await self.client.select_one(PROFILES_TABLE, [("role", "eq", role.value)])
        if existing:
            return User(**existing)

        logger.info("No %s profile found, seeding one", role.value)
        created = await self.client.insert(PROFILES_TABLE, [seed_profile(role)])
        if not created:
            raise DataServiceError(f"Data service returned no row for the seeded {role.value} profile")
        return User(**created[0])

    async def get_profile(self, user_id: str) -> Optional[User]:
        row = await self.client.select_one(PROFILES_TABLE, [("id", "eq", user_id)])
        return User(**row) if row else None
