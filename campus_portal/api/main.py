"""
Campus Portal API

Run with: uvicorn campus_portal.api.main:app --reload
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from campus_portal import __version__
from campus_portal.api.routes import (
    academics,
    auth,
    campus_map,
    community,
    dashboard,
    grievances,
    health,
    opportunities,
    sos,
)
from campus_portal.config import get_settings
from campus_portal.core.errors import (
    DataServiceError,
    NotFoundError,
    PermissionDeniedError,
    PortalError,
    ValidationError,
)

settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"

ERROR_STATUS = {
    ValidationError: 422,
    PermissionDeniedError: 403,
    NotFoundError: 404,
    DataServiceError: 502,
}

app = FastAPI(
    title="Campus Portal API",
    description="Grievances, academics, opportunities, community and campus map",
    version=__version__,
)


@app.exception_handler(PortalError)
async def portal_error_handler(request: Request, exc: PortalError) -> JSONResponse:
    status_code = ERROR_STATUS.get(type(exc), 400)
    if status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


app.include_router(health.router)
app.include_router(auth.router, prefix=API_PREFIX)
app.include_router(dashboard.router, prefix=API_PREFIX)
app.include_router(grievances.router, prefix=API_PREFIX)
app.include_router(academics.router, prefix=API_PREFIX)
app.include_router(opportunities.router, prefix=API_PREFIX)
app.include_router(community.router, prefix=API_PREFIX)
app.include_router(campus_map.router, prefix=API_PREFIX)
app.include_router(sos.router, prefix=API_PREFIX)
