"""
FastAPI dependencies

The acting user is identified by the X-Portal-User header carrying the
profile id handed out by the login stub. There is no real authentication.
"""

import logging
from typing import Callable, Optional

from fastapi import Depends, Header, HTTPException, status

from campus_portal.api.data_service import DataServiceClient
from campus_portal.api.services.auth_service import AuthService
from campus_portal.config import PortalSettings, get_settings
from campus_portal.core.calculators.projection import TargetGradeProjector
from campus_portal.core.errors import PermissionDeniedError
from campus_portal.core.models.users import User
from campus_portal.core.navigation import can_view

logger = logging.getLogger(__name__)

USER_HEADER = "X-Portal-User"


def get_data_client(settings: PortalSettings = Depends(get_settings)) -> DataServiceClient:
    return DataServiceClient(
        settings.data_url,
        api_key=settings.data_key,
        timeout=settings.data_timeout_s,
    )


def get_projector(settings: PortalSettings = Depends(get_settings)) -> TargetGradeProjector:
    return TargetGradeProjector(scale_max=settings.grade_scale_max)


async def get_current_user(
    user_id: Optional[str] = Header(None, alias=USER_HEADER),
    client: DataServiceClient = Depends(get_data_client),
) -> User:
    """Resolve the acting profile; 401 when the header is missing or unknown"""
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Missing {USER_HEADER} header",
        )

    user = await AuthService(client).get_profile(user_id)
    if user is None:
        logger.warning("Unknown portal user id: %s", user_id)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unknown portal user",
        )
    return user


def require_view(view_id: str) -> Callable:
    """Dependency allowing only roles that can open the given view"""

    async def checker(user: User = Depends(get_current_user)) -> User:
        if not can_view(user.role, view_id):
            raise PermissionDeniedError(f"{user.role} cannot open {view_id}")
        return user

    return checker
