"""
PROJECTION MODELS - Target-grade projection inputs and results

A projection answers: "what term average do I need next term to lift my
cumulative average to the target?" It is derived on every input change and
never stored.

RESULT FIELDS:
✅ current_points = current_average × credits_completed
✅ total_credits_after = credits_completed + credits_planned
✅ required_total_points = target_average × total_credits_after
✅ points_needed_this_term = required_total_points − current_points
✅ required_term_average = points_needed_this_term ÷ credits_planned
✅ achievable = required_term_average <= scale maximum (10)
✅ display_value = max(0, required_term_average), presentation only
"""

from decimal import Decimal, ROUND_HALF_UP
from enum import Enum
import math
from typing import List

from pydantic import BaseModel, ConfigDict, Field


def round_half_up(value: float, places: int = 2) -> float:
    """Round the way the results panel displays numbers (2.345 -> 2.35)"""
    if not math.isfinite(value):
        return value
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def json_safe(value):
    """Finite numbers pass through; inf, -inf and nan become their text form"""
    if isinstance(value, float) and not math.isfinite(value):
        return str(value)
    return value


class ProjectionOutlook(str, Enum):
    """How the required term average compares with where the student is now"""
    ON_TRACK = "on_track"
    NEEDS_EFFORT = "needs_effort"
    IMPOSSIBLE = "impossible"


OUTLOOK_MESSAGES = {
    ProjectionOutlook.ON_TRACK: "You're safe!",
    ProjectionOutlook.NEEDS_EFFORT: "Work hard!",
    ProjectionOutlook.IMPOSSIBLE: "Impossible (Max 10)",
}


class ProjectionResult(BaseModel):
    """Target-grade projection with its intermediate quantities"""

    model_config = ConfigDict(frozen=True)

    # Inputs after clamping
    current_average: float = Field(..., description="Current cumulative average")
    credits_completed: int = Field(..., ge=0, description="Credits already completed")
    credits_planned: int = Field(..., ge=1, description="Credits planned for next term")
    target_average: float = Field(..., description="Target cumulative average")

    # Intermediate quantities, shown in the breakdown
    current_points: float = Field(..., description="Grade points banked so far")
    total_credits_after: int = Field(..., description="Credits once next term is done")
    required_total_points: float = Field(..., description="Grade points the target requires")
    points_needed_this_term: float = Field(..., description="Grade points next term must contribute")

    # Outputs
    required_term_average: float = Field(..., description="Unclamped term average required")
    achievable: bool = Field(..., description="Whether the requirement fits on the scale")
    display_value: float = Field(..., ge=0.0, description="Required term average floored at zero")
    scale_max: float = Field(10.0, gt=0.0, description="Scale ceiling")

    @property
    def outlook(self) -> ProjectionOutlook:
        """Classify the result using the signed requirement, never the display value"""
        if self.required_term_average > self.scale_max:
            return ProjectionOutlook.IMPOSSIBLE
        if self.required_term_average <= self.current_average:
            return ProjectionOutlook.ON_TRACK
        return ProjectionOutlook.NEEDS_EFFORT

    @property
    def message(self) -> str:
        return OUTLOOK_MESSAGES[self.outlook]

    @property
    def display_text(self) -> str:
        """Required term average as shown in the results panel"""
        if not self.achievable:
            return f"> {self.scale_max:g}"
        return f"{round_half_up(self.display_value, 2):.2f}"

    def breakdown_lines(self) -> List[str]:
        """
        Basis of calculation for user transparency

        Returns:
            Lines for current points, target points, points needed and the
            final division
        """
        return [
            f"Current Pts ({self.current_average:g}×{self.credits_completed}): "
            f"{round_half_up(self.current_points, 1):.1f}",
            f"Target Pts ({round_half_up(self.target_average, 2):.2f}×{self.total_credits_after}): "
            f"{round_half_up(self.required_total_points, 1):.1f}",
            f"Pts Needed (Diff): {round_half_up(self.points_needed_this_term, 1):.1f}",
            f"{round_half_up(self.points_needed_this_term, 1):.1f} ÷ {self.credits_planned} Credits = "
            f"{round_half_up(self.required_term_average, 2):.2f} SGPA",
        ]

    def to_payload(self) -> dict:
        """Serialisable view including the derived presentation fields"""
        payload = {key: json_safe(value) for key, value in self.model_dump().items()}
        payload.update(
            outlook=self.outlook.value,
            message=self.message,
            display_text=self.display_text,
            breakdown=self.breakdown_lines(),
        )
        return payload


class PredictorInputs(BaseModel):
    """Starting values for the academics screen predictor"""

    current_average: float = Field(..., description="From the profile cgpa")
    credits_completed: int = Field(..., ge=0, description="Credits done")
    credits_planned: int = Field(..., ge=1, description="Next term credits")
    target_average: float = Field(..., description="Target cumulative average")


__all__ = [
    "round_half_up",
    "json_safe",
    "ProjectionOutlook",
    "OUTLOOK_MESSAGES",
    "ProjectionResult",
    "PredictorInputs",
]
