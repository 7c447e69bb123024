"""
PORTAL RECORDS - Pydantic schemas for rows owned by the hosted data service

RECORD TYPES:
✅ Grievances: campus complaints with status workflow and priority
✅ Academics: courses with attendance, shared resources, assignments
✅ Opportunities: research, internship and project calls from faculty
✅ Community: forum posts, comments and moderation bans
✅ Campus: map locations and system health rows

VALIDATION RULES:
- Titles and content must not be blank
- Closed vocabularies (status, priority, category, type) are Enums
- Attendance counts must be non-negative
- Missing tags and attendance counters default to empty/zero

The application only holds transient copies of these rows; the data service
is the system of record.
"""

import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .users import UserRole


def _require_text(v: str) -> str:
    if v is None or not str(v).strip():
        raise ValueError("must not be blank")
    return str(v).strip()


class GrievanceStatus(str, Enum):
    """Grievance workflow states"""
    SUBMITTED = "Submitted"
    UNDER_REVIEW = "Under Review"
    IN_PROGRESS = "In Progress"
    RESOLVED = "Resolved"


class Priority(str, Enum):
    """Grievance priority levels"""
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    URGENT = "Urgent"


class GrievanceCategory(str, Enum):
    """Grievance categories offered on the submission form"""
    INFRASTRUCTURE = "Infrastructure"
    ACADEMICS = "Academics"
    HOSTEL = "Hostel"
    FOOD = "Food"
    OTHER = "Other"


class OpportunityType(str, Enum):
    INTERNSHIP = "Internship"
    RESEARCH = "Research"
    PROJECT = "Project"


class ResourceType(str, Enum):
    PDF = "PDF"
    DOC = "DOC"
    PPT = "PPT"


class Record(BaseModel):
    """Row read back from the data service"""

    model_config = ConfigDict(use_enum_values=True)

    id: str = Field(..., description="Row identifier")

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v):
        """Some tables use integer keys, others uuids"""
        return str(v) if v is not None else v


class Grievance(Record):
    """Grievance row"""

    title: str = Field(..., description="Short summary")
    category: str = Field(..., description="Category label")
    priority: Priority = Field(Priority.MEDIUM, description="Priority level")
    status: GrievanceStatus = Field(GrievanceStatus.SUBMITTED, description="Workflow state")
    date: Optional[datetime.date] = Field(None, description="Submission date (YYYY-MM-DD)")
    description: str = Field("", description="Full description")
    location: Optional[str] = Field(None, description="Where the issue is")
    votes: int = Field(0, ge=0, description="Students impacted")
    is_anonymous: bool = Field(False, description="Hide the submitter")
    created_at: Optional[datetime.datetime] = Field(None, description="Creation timestamp")

    @property
    def is_resolved(self) -> bool:
        return self.status == GrievanceStatus.RESOLVED


class GrievanceSubmission(BaseModel):
    """Grievance form payload"""

    model_config = ConfigDict(use_enum_values=True)

    title: str = Field(..., description="Short summary")
    category: GrievanceCategory = Field(GrievanceCategory.INFRASTRUCTURE, description="Category")
    priority: Priority = Field(Priority.MEDIUM, description="Priority level")
    location: str = Field("", description="Where the issue is")
    description: str = Field(..., description="Full description")
    is_anonymous: bool = Field(False, description="Hide the submitter")

    @field_validator("title", "description")
    @classmethod
    def validate_text(cls, v):
        return _require_text(v)


class Course(Record):
    """Course row with attendance counters"""

    code: str = Field(..., description="Course code")
    name: str = Field(..., description="Course name")
    credits: float = Field(0.0, ge=0.0, description="Credit weight")
    attendance: int = Field(0, ge=0, description="Classes attended")
    total_classes: int = Field(0, ge=0, description="Classes held")

    @field_validator("attendance", "total_classes", mode="before")
    @classmethod
    def default_missing_counts(cls, v):
        """Courses without logged attendance store NULL counters"""
        return 0 if v is None else v


class Resource(Record):
    """Shared study resource"""

    title: str = Field(..., description="Resource title")
    type: str = Field(..., description="File type label")
    size: str = Field("", description="Human readable size")
    uploaded_by: str = Field(..., description="Uploader name")
    url: Optional[str] = Field(None, description="Download URL")


class ResourceUpload(BaseModel):
    """Faculty resource upload form"""

    model_config = ConfigDict(use_enum_values=True)

    title: str = Field(..., description="Resource title")
    type: ResourceType = Field(ResourceType.PDF, description="File type")

    @field_validator("title")
    @classmethod
    def validate_title(cls, v):
        return _require_text(v)


class Assignment(Record):
    title: str = Field(..., description="Assignment title")
    course_code: str = Field(..., description="Owning course code")
    due_date: datetime.datetime = Field(..., description="Due timestamp")
    type: str = Field("", description="Assignment kind")


class Opportunity(Record):
    """Opportunity posted by faculty"""

    title: str = Field(..., description="Opportunity title")
    professor: str = Field(..., description="Posting professor")
    type: OpportunityType = Field(..., description="Opportunity kind")
    deadline: str = Field(..., description="Application deadline")
    stipend: Optional[str] = Field(None, description="Stipend description")
    tags: List[str] = Field(default_factory=list, description="Topic tags")

    @field_validator("tags", mode="before")
    @classmethod
    def default_tags(cls, v):
        return v or []


class OpportunityDraft(BaseModel):
    """Opportunity form payload; tags arrive as comma separated text"""

    model_config = ConfigDict(use_enum_values=True)

    title: str = Field(..., description="Opportunity title")
    type: OpportunityType = Field(OpportunityType.RESEARCH, description="Opportunity kind")
    deadline: str = Field(..., description="Application deadline")
    stipend: str = Field("", description="Stipend description, blank when unpaid")
    tags: str = Field("", description="Comma separated tags")

    @field_validator("title", "deadline")
    @classmethod
    def validate_text(cls, v):
        return _require_text(v)

    @property
    def tag_list(self) -> List[str]:
        """Split the comma separated tags, dropping blanks"""
        if not self.tags:
            return []
        return [tag.strip() for tag in self.tags.split(",") if tag.strip()]


class Post(Record):
    """Community forum post"""

    title: str = Field(..., description="Post title")
    content: str = Field(..., description="Post body")
    author_id: str = Field(..., description="Author profile id")
    author_name: str = Field(..., description="Author display name")
    author_role: UserRole = Field(UserRole.STUDENT, description="Author access level")
    likes: int = Field(0, ge=0, description="Like count")
    is_flagged: bool = Field(False, description="Flagged for moderation")
    created_at: Optional[datetime.datetime] = Field(None, description="Creation timestamp")

    @field_validator("author_id", mode="before")
    @classmethod
    def coerce_author_id(cls, v):
        return str(v) if v is not None else v

    @field_validator("likes", mode="before")
    @classmethod
    def default_likes(cls, v):
        return 0 if v is None else v


class PostDraft(BaseModel):
    title: str = Field(..., description="Post title")
    content: str = Field(..., description="Post body")

    @field_validator("title", "content")
    @classmethod
    def validate_text(cls, v):
        return _require_text(v)


class Comment(Record):
    post_id: str = Field(..., description="Parent post id")
    content: str = Field(..., description="Comment body")
    author_id: str = Field(..., description="Author profile id")
    author_name: str = Field(..., description="Author display name")
    created_at: Optional[datetime.datetime] = Field(None, description="Creation timestamp")

    @field_validator("post_id", "author_id", mode="before")
    @classmethod
    def coerce_refs(cls, v):
        return str(v) if v is not None else v


class BannedUser(BaseModel):
    email: str = Field(..., description="Banned email address")
    reason: str = Field(..., description="Reason given by the moderator")
    banned_by: str = Field(..., description="Moderator name")


class MapLocation(Record):
    """Campus map marker"""

    name: str = Field(..., description="Location name")
    type: str = Field(..., description="Location kind (Academic, Hostel, ...)")
    lat: float = Field(..., ge=-90.0, le=90.0, description="Latitude")
    lng: float = Field(..., ge=-180.0, le=180.0, description="Longitude")
    description: str = Field("", description="Popup description")


class SystemStatus(Record):
    name: str = Field(..., description="Subsystem name")
    status: str = Field(..., description="Reported status")
    health: int = Field(..., ge=0, le=100, description="Health percentage")


__all__ = [
    "GrievanceStatus",
    "Priority",
    "GrievanceCategory",
    "OpportunityType",
    "ResourceType",
    "Record",
    "Grievance",
    "GrievanceSubmission",
    "Course",
    "Resource",
    "ResourceUpload",
    "Assignment",
    "Opportunity",
    "OpportunityDraft",
    "Post",
    "PostDraft",
    "Comment",
    "BannedUser",
    "MapLocation",
    "SystemStatus",
]
