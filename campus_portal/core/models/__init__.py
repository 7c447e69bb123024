"""Pydantic models for portal records, users and grade projections."""

from .projection import (
    OUTLOOK_MESSAGES,
    PredictorInputs,
    ProjectionOutlook,
    ProjectionResult,
    round_half_up,
)
from .records import (
    Assignment,
    BannedUser,
    Comment,
    Course,
    Grievance,
    GrievanceCategory,
    GrievanceStatus,
    GrievanceSubmission,
    MapLocation,
    Opportunity,
    OpportunityDraft,
    OpportunityType,
    Post,
    PostDraft,
    Priority,
    Record,
    Resource,
    ResourceType,
    ResourceUpload,
    SystemStatus,
)
from .users import MODERATOR_ROLES, User, UserRole

__all__ = [
    "OUTLOOK_MESSAGES",
    "PredictorInputs",
    "ProjectionOutlook",
    "ProjectionResult",
    "round_half_up",
    "Assignment",
    "BannedUser",
    "Comment",
    "Course",
    "Grievance",
    "GrievanceCategory",
    "GrievanceStatus",
    "GrievanceSubmission",
    "MapLocation",
    "Opportunity",
    "OpportunityDraft",
    "OpportunityType",
    "Post",
    "PostDraft",
    "Priority",
    "Record",
    "Resource",
    "ResourceType",
    "ResourceUpload",
    "SystemStatus",
    "MODERATOR_ROLES",
    "User",
    "UserRole",
]
