"""
SOS alert

The portal raises the alarm in the log at CRITICAL level so whatever ships
the logs can page campus security. The client-side countdown is
presentation only.
"""

import datetime
import logging
from typing import Any, Dict, Optional

from campus_portal.core.errors import ValidationError
from campus_portal.core.models.users import User

logger = logging.getLogger(__name__)


def trigger(
    user: User,
    latitude: Optional[float] = None,
    longitude: Optional[float] = None,
    now: Optional[datetime.datetime] = None,
) -> Dict[str, Any]:
    """
    Record an emergency alert

    Args:
        user: Who raised the alert
        latitude: Optional position; must be supplied together with longitude
        longitude: Optional position

    Returns:
        Acknowledgement with the alert timestamp and coordinates when known
    """
    if (latitude is None) != (longitude is None):
        raise ValidationError("Latitude and longitude must be supplied together")
    if latitude is not None and not (-90.0 <= latitude <= 90.0 and -180.0 <= longitude <= 180.0):
        raise ValidationError(f"Invalid coordinates: {latitude}, {longitude}")

    if now is None:
        now = datetime.datetime.now(datetime.timezone.utc)

    location = f"{latitude:.6f},{longitude:.6f}" if latitude is not None else "unknown"
    logger.critical(
        "SOS ALERT from %s <%s> (%s) at %s, location %s",
        user.name,
        user.email,
        user.role,
        now.isoformat(),
        location,
    )

    ack = {
        "acknowledged": True,
        "user_id": user.id,
        "timestamp": now.isoformat(),
        "message": "Campus security has been alerted.",
    }
    if latitude is not None:
        ack["location"] = {"lat": latitude, "lng": longitude}
    return ack
