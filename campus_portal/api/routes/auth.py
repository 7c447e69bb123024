"""Login stub and navigation"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from campus_portal.api.data_service import DataServiceClient
from campus_portal.api.deps import get_current_user, get_data_client
from campus_portal.api.services.auth_service import AuthService
from campus_portal.core.models.users import User, UserRole
from campus_portal.core.navigation import DEFAULT_VIEW, nav_for_role

router = APIRouter(prefix="/auth", tags=["auth"])


class LoginRequest(BaseModel):
    role: UserRole = Field(..., description="Access level chosen on the login screen")


def _nav_payload(user: User) -> list:
    return [{"id": item.id, "label": item.label} for item in nav_for_role(user.role)]


@router.post("/login")
async def login(body: LoginRequest, client: DataServiceClient = Depends(get_data_client)):
    """
    Sign in by role

    The returned user id goes in the X-Portal-User header of later requests.
    """
    user = await AuthService(client).login(body.role)
    return {"user": user.model_dump(), "nav": _nav_payload(user), "view": DEFAULT_VIEW}


@router.get("/me")
async def me(user: User = Depends(get_current_user)):
    return user.model_dump()


@router.get("/nav")
async def nav(user: User = Depends(get_current_user)):
    return _nav_payload(user)
