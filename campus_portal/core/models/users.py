"""
USER MODELS - Portal identities and access levels

ROLES:
✅ Student: grievances, academics, opportunities, map, community
✅ Faculty: academics (resource uploads), opportunities (publishing), map, community
✅ Authority: grievance moderation, community moderation
✅ Admin: everything an Authority can do plus the campus map
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class UserRole(str, Enum):
    """Access levels offered on the login screen"""
    STUDENT = "Student"
    FACULTY = "Faculty"
    AUTHORITY = "Authority"
    ADMIN = "Admin"


# Roles allowed to moderate grievances and forum content
MODERATOR_ROLES = (UserRole.AUTHORITY, UserRole.ADMIN)


class User(BaseModel):
    """Profile row from the hosted `profiles` table"""

    model_config = ConfigDict(use_enum_values=True)

    id: str = Field(..., description="Profile identifier")
    name: str = Field(..., description="Display name")
    email: str = Field(..., description="Institutional email address")
    role: UserRole = Field(..., description="Access level")
    avatar: Optional[str] = Field(None, description="Avatar image URL")
    cgpa: Optional[float] = Field(None, description="Cumulative grade-point average on the 10-point scale")

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v):
        """Profile ids may arrive as integers from some tables"""
        return str(v) if v is not None else v

    @field_validator("email")
    @classmethod
    def validate_email(cls, v):
        """Validate email format"""
        if v and "@" not in v:
            raise ValueError("Invalid email format")
        return v

    @property
    def is_moderator(self) -> bool:
        return self.role in MODERATOR_ROLES

    @property
    def is_faculty(self) -> bool:
        return self.role == UserRole.FACULTY


__all__ = ["UserRole", "MODERATOR_ROLES", "User"]
