"""Calculators for the academics screen."""

from .attendance import (
    AttendanceBand,
    AttendanceSummary,
    attendance_band,
    attendance_percent,
    summarize_course,
)
from .projection import (
    MAX_SWEEP_ROWS,
    SCALE_MAX,
    TargetGradeProjector,
    clamp_credits,
    max_reachable_target,
    project,
    target_sweep,
)

__all__ = [
    "AttendanceBand",
    "AttendanceSummary",
    "attendance_band",
    "attendance_percent",
    "summarize_course",
    "MAX_SWEEP_ROWS",
    "SCALE_MAX",
    "TargetGradeProjector",
    "clamp_credits",
    "max_reachable_target",
    "project",
    "target_sweep",
]
