"""Emergency alert"""

from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from campus_portal.api.deps import get_current_user
from campus_portal.api.services import sos_service
from campus_portal.core.models.users import User

router = APIRouter(prefix="/sos", tags=["sos"])


class SOSRequest(BaseModel):
    latitude: Optional[float] = Field(None, description="Current latitude")
    longitude: Optional[float] = Field(None, description="Current longitude")


@router.post("")
async def trigger_sos(body: Optional[SOSRequest] = None, user: User = Depends(get_current_user)):
    body = body or SOSRequest()
    return sos_service.trigger(user, body.latitude, body.longitude)
