#!/usr/bin/env python3
"""
TARGET-GRADE PROJECTOR - Term average required to reach a target cumulative average

CALCULATION:
✅ Clamp credits: completed >= 0, planned >= 1 (division by zero never reached)
✅ Required term average = (target × (completed + planned) − current × completed) ÷ planned
✅ Achievable when the required term average is at most the scale maximum (10)
✅ Display value floors negative requirements at 0; achievability uses the signed value
✅ Target sweep: one projection per slider position (0.00 → 10.00, step 0.05)

EDGE CASES HANDLED:
- Negative completed credits: clamped to 0
- Zero or negative planned credits: clamped to 1
- Averages outside 0-10: accepted, result is advisory only
- Target equal to current average: requirement equals the current average exactly

Priority: CRITICAL - Academics screen predictor
Dependencies: models.projection for result types, pandas/numpy for sweeps
"""

import logging
from typing import List, Optional, Tuple

import numpy as np
import pandas as pd

from campus_portal.core.models.projection import (
    PredictorInputs,
    ProjectionResult,
    round_half_up,
)
from campus_portal.core.models.users import User, UserRole

logger = logging.getLogger(__name__)


# Scale ceiling for term and cumulative averages
SCALE_MAX = 10.0

# Slider quantisation for the target average
TARGET_STEP = 0.05

# Upper bound on rows a single sweep may produce
MAX_SWEEP_ROWS = 2001

# Predictor starting values
DEFAULT_CREDITS_COMPLETED = 85
DEFAULT_CREDITS_PLANNED = 20
DEFAULT_CURRENT_AVERAGE = 7.0
DEFAULT_TARGET_AVERAGE = 8.5
TARGET_BUMP = 0.5


def clamp_credits(credits_completed: int, credits_planned: int) -> Tuple[int, int]:
    """Apply the input floors: completed >= 0, planned >= 1"""
    return max(0, credits_completed), max(1, credits_planned)


def project(
    current_average: float,
    credits_completed: int,
    credits_planned: int,
    target_average: float,
    scale_max: float = SCALE_MAX,
) -> ProjectionResult:
    """
    Project the term average required to reach a target cumulative average

    Args:
        current_average: Current cumulative average
        credits_completed: Credits completed so far (clamped to >= 0)
        credits_planned: Credits planned for next term (clamped to >= 1)
        target_average: Target cumulative average after next term
        scale_max: Scale ceiling used for the achievability check

    Returns:
        ProjectionResult with intermediate quantities and the verdict
    """
    credits_completed, credits_planned = clamp_credits(credits_completed, credits_planned)

    current_points = current_average * credits_completed
    total_credits_after = credits_completed + credits_planned
    required_total_points = target_average * total_credits_after
    points_needed_this_term = required_total_points - current_points

    # Same quantity as points_needed_this_term / credits_planned, arranged so
    # a target equal to the current average returns that average exactly.
    required_term_average = (
        target_average
        + (target_average - current_average) * credits_completed / credits_planned
    )

    return ProjectionResult(
        current_average=current_average,
        credits_completed=credits_completed,
        credits_planned=credits_planned,
        target_average=target_average,
        current_points=current_points,
        total_credits_after=total_credits_after,
        required_total_points=required_total_points,
        points_needed_this_term=points_needed_this_term,
        required_term_average=required_term_average,
        achievable=required_term_average <= scale_max,
        display_value=max(0.0, required_term_average),
        scale_max=scale_max,
    )


def max_reachable_target(
    current_average: float,
    credits_completed: int,
    credits_planned: int,
    scale_max: float = SCALE_MAX,
) -> float:
    """Highest cumulative average reachable with a perfect next term"""
    credits_completed, credits_planned = clamp_credits(credits_completed, credits_planned)
    total_points = current_average * credits_completed + scale_max * credits_planned
    return total_points / (credits_completed + credits_planned)


def target_sweep(
    current_average: float,
    credits_completed: int,
    credits_planned: int,
    start: float = 0.0,
    stop: float = SCALE_MAX,
    step: float = TARGET_STEP,
    scale_max: float = SCALE_MAX,
) -> pd.DataFrame:
    """
    Project every slider position between start and stop (inclusive)

    Returns:
        DataFrame with columns target_average, required_term_average,
        display_value, achievable, outlook
    """
    if step <= 0:
        raise ValueError(f"Sweep step must be positive, got: {step}")
    row_count = int(np.floor((stop - start) / step + 0.5)) + 1
    if row_count > MAX_SWEEP_ROWS:
        raise ValueError(f"Sweep of {row_count} targets exceeds the limit of {MAX_SWEEP_ROWS}")

    targets = np.round(np.arange(start, stop + step / 2, step), 2)
    rows = []
    for target in targets:
        result = project(current_average, credits_completed, credits_planned, float(target), scale_max)
        rows.append(
            {
                "target_average": result.target_average,
                "required_term_average": result.required_term_average,
                "display_value": result.display_value,
                "achievable": result.achievable,
                "outlook": result.outlook.value,
            }
        )

    return pd.DataFrame(
        rows,
        columns=["target_average", "required_term_average", "display_value", "achievable", "outlook"],
    )


class TargetGradeProjector:
    """Projector bound to a grade scale, keeping a readable log of each projection"""

    def __init__(self, scale_max: float = SCALE_MAX):
        self.scale_max = scale_max
        self.projection_log: List[str] = []

    def project(
        self,
        current_average: float,
        credits_completed: int,
        credits_planned: int,
        target_average: float,
    ) -> ProjectionResult:
        """Project and record the basis of calculation"""
        self.projection_log = []
        if credits_completed < 0 or credits_planned < 1:
            self.projection_log.append(
                f"⚠️ Clamped credits ({credits_completed}, {credits_planned}) "
                f"to {clamp_credits(credits_completed, credits_planned)}"
            )
        if not 0.0 <= current_average <= self.scale_max or not 0.0 <= target_average <= self.scale_max:
            self.projection_log.append(
                f"⚠️ Average outside 0-{self.scale_max:g}: result is advisory only"
            )

        result = project(
            current_average,
            credits_completed,
            credits_planned,
            target_average,
            scale_max=self.scale_max,
        )

        self.projection_log.extend(result.breakdown_lines())
        self.projection_log.append(f"✅ {result.message}")
        logger.debug(
            "Projected target %.2f from %.2f over %d+%d credits: %.4f",
            result.target_average,
            result.current_average,
            result.credits_completed,
            result.credits_planned,
            result.required_term_average,
        )
        return result

    def defaults_for(self, user: Optional[User]) -> PredictorInputs:
        """
        Starting predictor values for a profile

        The current average comes from the profile cgpa; the target starts
        half a point above it. A missing or zero cgpa means no grades yet, so
        the predictor starts at 7.0 and 8.5.
        """
        cgpa = user.cgpa if user is not None else None
        if not cgpa:
            current, target = DEFAULT_CURRENT_AVERAGE, DEFAULT_TARGET_AVERAGE
        else:
            current, target = cgpa, cgpa + TARGET_BUMP
        return PredictorInputs(
            current_average=current,
            credits_completed=DEFAULT_CREDITS_COMPLETED,
            credits_planned=DEFAULT_CREDITS_PLANNED,
            target_average=target,
        )

    @staticmethod
    def is_offered_to(user: User) -> bool:
        """Faculty monitor courses and do not get the predictor"""
        return user.role != UserRole.FACULTY

    def get_projection_log(self) -> List[str]:
        """Get the basis of the last projection for debugging"""
        return self.projection_log


def main():
    """Walk through the predictor with the academics screen defaults"""

    print("🎯 TARGET-GRADE PROJECTOR")
    print("=" * 60)

    projector = TargetGradeProjector()
    for target in (7.5, 9.9):
        result = projector.project(7.0, DEFAULT_CREDITS_COMPLETED, DEFAULT_CREDITS_PLANNED, target)
        print(f"\nTarget {target:.2f}: required SGPA {result.display_text} ({result.message})")
        for line in projector.get_projection_log():
            print(f"  {line}")

    ceiling = max_reachable_target(7.0, DEFAULT_CREDITS_COMPLETED, DEFAULT_CREDITS_PLANNED)
    print(f"\nHighest reachable CGPA next term: {round_half_up(ceiling, 2):.2f}")


if __name__ == "__main__":
    main()
