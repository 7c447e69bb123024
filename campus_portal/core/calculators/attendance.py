"""
ATTENDANCE - Per-course attendance percentage and standing band

BANDS:
✅ good: above 75%
✅ warning: above 60%
✅ critical: 60% or below
Courses with no classes held report no data instead of 0%.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from campus_portal.core.models.records import Course


GOOD_THRESHOLD = 75
WARNING_THRESHOLD = 60


class AttendanceBand(str, Enum):
    GOOD = "good"
    WARNING = "warning"
    CRITICAL = "critical"


class AttendanceSummary(BaseModel):
    """Attendance figures shown on a course card"""

    course_id: str = Field(..., description="Course identifier")
    code: str = Field(..., description="Course code")
    name: str = Field(..., description="Course name")
    credits: float = Field(..., description="Credit weight")
    attended: int = Field(..., description="Classes attended")
    total_classes: int = Field(..., description="Classes held")
    percent: Optional[int] = Field(None, description="Rounded attendance percentage, None without data")
    band: Optional[AttendanceBand] = Field(None, description="Standing band, None without data")


def attendance_percent(attended: int, total_classes: int) -> Optional[int]:
    """Rounded percentage, or None when no classes have been held"""
    if not total_classes or total_classes <= 0:
        return None
    # Half-up rounding, matching how the course cards show it
    return int(attended * 100 / total_classes + 0.5)


def attendance_band(percent: Optional[int]) -> Optional[AttendanceBand]:
    if percent is None:
        return None
    if percent > GOOD_THRESHOLD:
        return AttendanceBand.GOOD
    if percent > WARNING_THRESHOLD:
        return AttendanceBand.WARNING
    return AttendanceBand.CRITICAL


def summarize_course(course: Course) -> AttendanceSummary:
    percent = attendance_percent(course.attendance, course.total_classes)
    return AttendanceSummary(
        course_id=course.id,
        code=course.code,
        name=course.name,
        credits=course.credits,
        attended=course.attendance,
        total_classes=course.total_classes,
        percent=percent,
        band=attendance_band(percent),
    )


__all__ = [
    "AttendanceBand",
    "AttendanceSummary",
    "attendance_percent",
    "attendance_band",
    "summarize_course",
]
