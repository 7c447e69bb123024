"""Destiny Manager: courses, resources, assignments and the target-grade predictor"""

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from campus_portal.api.data_service import DataServiceClient
from campus_portal.api.deps import get_data_client, get_projector, require_view
from campus_portal.api.services.academics_service import AcademicsService
from campus_portal.core.calculators.projection import (
    TARGET_STEP,
    TargetGradeProjector,
    max_reachable_target,
    target_sweep,
)
from campus_portal.core.errors import PermissionDeniedError, ValidationError
from campus_portal.core.models.projection import json_safe
from campus_portal.core.models.records import ResourceUpload
from campus_portal.core.models.users import User

router = APIRouter(prefix="/academics", tags=["academics"])

MIN_SWEEP_STEP = 0.01

require_academics = require_view("academics")


class ProjectionRequest(BaseModel):
    """Predictor inputs; out-of-range credits are clamped, not rejected"""

    current_average: float = Field(..., description="Current cumulative average")
    credits_completed: int = Field(..., description="Credits done")
    credits_planned: int = Field(..., description="Next term credits")
    target_average: float = Field(..., description="Target cumulative average")


class SweepRequest(BaseModel):
    current_average: float = Field(..., description="Current cumulative average")
    credits_completed: int = Field(..., description="Credits done")
    credits_planned: int = Field(..., description="Next term credits")
    step: float = Field(TARGET_STEP, ge=MIN_SWEEP_STEP, description="Target increment")


def _ensure_predictor(user: User, projector: TargetGradeProjector):
    if not projector.is_offered_to(user):
        raise PermissionDeniedError("The grade predictor is not offered to faculty")


@router.get("")
async def overview(
    user: User = Depends(require_academics),
    client: DataServiceClient = Depends(get_data_client),
    projector: TargetGradeProjector = Depends(get_projector),
):
    return await AcademicsService(client, projector).overview(user)


@router.get("/courses")
async def courses(
    user: User = Depends(require_academics),
    client: DataServiceClient = Depends(get_data_client),
):
    return [c.model_dump() for c in await AcademicsService(client).courses()]


@router.get("/resources")
async def resources(
    user: User = Depends(require_academics),
    client: DataServiceClient = Depends(get_data_client),
):
    return [r.model_dump() for r in await AcademicsService(client).resources()]


@router.post("/resources", status_code=status.HTTP_201_CREATED)
async def upload_resource(
    upload: ResourceUpload,
    user: User = Depends(require_academics),
    client: DataServiceClient = Depends(get_data_client),
):
    """Catalogue a resource (Faculty only); returns the refreshed vault"""
    refreshed = await AcademicsService(client).upload_resource(user, upload)
    return [r.model_dump() for r in refreshed]


@router.get("/assignments")
async def assignments(
    upcoming: bool = False,
    user: User = Depends(require_academics),
    client: DataServiceClient = Depends(get_data_client),
):
    service = AcademicsService(client)
    items = await service.upcoming_assignments() if upcoming else await service.assignments()
    return [a.model_dump() for a in items]


@router.get("/projection/defaults")
async def projection_defaults(
    user: User = Depends(require_academics),
    projector: TargetGradeProjector = Depends(get_projector),
):
    _ensure_predictor(user, projector)
    return projector.defaults_for(user).model_dump()


@router.post("/projection")
async def projection(
    body: ProjectionRequest,
    user: User = Depends(require_academics),
    projector: TargetGradeProjector = Depends(get_projector),
):
    """Required term average for the submitted inputs"""
    _ensure_predictor(user, projector)
    result = projector.project(
        body.current_average,
        body.credits_completed,
        body.credits_planned,
        body.target_average,
    )
    return result.to_payload()


@router.post("/projection/sweep")
async def projection_sweep(
    body: SweepRequest,
    user: User = Depends(require_academics),
    projector: TargetGradeProjector = Depends(get_projector),
):
    """Requirement at every target from 0 to the scale maximum"""
    _ensure_predictor(user, projector)
    try:
        frame = target_sweep(
            body.current_average,
            body.credits_completed,
            body.credits_planned,
            stop=projector.scale_max,
            step=body.step,
            scale_max=projector.scale_max,
        )
    except ValueError as exc:
        raise ValidationError(str(exc)) from exc
    ceiling = max_reachable_target(
        body.current_average,
        body.credits_completed,
        body.credits_planned,
        scale_max=projector.scale_max,
    )
    rows = [
        {key: json_safe(value) for key, value in row.items()}
        for row in frame.to_dict(orient="records")
    ]
    return {"max_reachable_target": json_safe(ceiling), "rows": rows}
