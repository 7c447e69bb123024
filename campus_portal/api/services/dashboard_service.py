"""
HIGH COMMAND DASHBOARD - Headline counts, system health and weekly activity

STATS:
✅ Active grievances: status other than Resolved
✅ Resolved grievances
✅ Total students: profiles with the Student role
✅ System health rows as stored
✅ Seven-day activity: one bucket per day, oldest first, today last

Activity is bucketed by UTC calendar day.
"""

import datetime
import logging
from typing import Any, Dict, Iterable, List, Optional

import pandas as pd

from campus_portal.api.data_service import DataServiceClient
from campus_portal.core.models.records import GrievanceStatus, SystemStatus
from campus_portal.core.models.users import UserRole

logger = logging.getLogger(__name__)

GRIEVANCES_TABLE = "grievances"
PROFILES_TABLE = "profiles"
SYSTEM_STATUS_TABLE = "system_status"

ACTIVITY_DAYS = 7


def activity_window_start(now: datetime.datetime, days: int = ACTIVITY_DAYS) -> datetime.datetime:
    """Midnight UTC of the oldest day in the window"""
    if now.tzinfo is None:
        now = now.replace(tzinfo=datetime.timezone.utc)
    today = now.astimezone(datetime.timezone.utc).replace(hour=0, minute=0, second=0, microsecond=0)
    return today - datetime.timedelta(days=days - 1)


def build_activity(
    rows: Iterable[Dict[str, Any]],
    now: datetime.datetime,
    days: int = ACTIVITY_DAYS,
) -> List[Dict[str, Any]]:
    """
    Count grievance submissions and resolutions per day

    Args:
        rows: Grievance rows with created_at and status
        now: Reference time; its UTC day is the last bucket
        days: Window length

    Returns:
        One {"name", "date", "submissions", "resolved"} entry per day, oldest first
    """
    start = activity_window_start(now, days)
    index = pd.date_range(start=start, periods=days, freq="D")

    frame = pd.DataFrame(list(rows), columns=["created_at", "status"])
    if frame.empty:
        counts = pd.DataFrame(0, index=index, columns=["submissions", "resolved"])
    else:
        frame["created_at"] = pd.to_datetime(frame["created_at"], utc=True, format="ISO8601")
        frame = frame[frame["created_at"] >= start].copy()
        frame["day"] = frame["created_at"].dt.floor("D")
        frame["resolved"] = (frame["status"] == GrievanceStatus.RESOLVED.value).astype(int)
        frame["submissions"] = 1 - frame["resolved"]
        counts = (
            frame.groupby("day")[["submissions", "resolved"]]
            .sum()
            .reindex(index, fill_value=0)
        )

    return [
        {
            "name": day.strftime("%a"),
            "date": day.date().isoformat(),
            "submissions": int(row["submissions"]),
            "resolved": int(row["resolved"]),
        }
        for day, row in counts.iterrows()
    ]


class DashboardService:

    def __init__(self, client: DataServiceClient):
        self.client = client

    async def stats(self) -> Dict[str, int]:
        resolved = GrievanceStatus.RESOLVED.value
        return {
            "active_grievances": await self.client.count(GRIEVANCES_TABLE, [("status", "neq", resolved)]),
            "resolved_grievances": await self.client.count(GRIEVANCES_TABLE, [("status", "eq", resolved)]),
            "total_students": await self.client.count(PROFILES_TABLE, [("role", "eq", UserRole.STUDENT.value)]),
        }

    async def system_status(self) -> List[SystemStatus]:
        rows = await self.client.select(SYSTEM_STATUS_TABLE)
        return [SystemStatus(**row) for row in rows]

    async def weekly_activity(self, now: Optional[datetime.datetime] = None) -> List[Dict[str, Any]]:
        if now is None:
            now = datetime.datetime.now(datetime.timezone.utc)
        start = activity_window_start(now)
        rows = await self.client.select(
            GRIEVANCES_TABLE,
            [("created_at", "gte", start.isoformat())],
            columns="created_at,status",
        )
        return build_activity(rows, now)

    async def overview(self, now: Optional[datetime.datetime] = None) -> Dict[str, Any]:
        """Everything the dashboard shows"""
        stats = await self.stats()
        logger.debug("Dashboard stats: %s", stats)
        return {
            "stats": stats,
            "system_status": [s.model_dump() for s in await self.system_status()],
            "activity": await self.weekly_activity(now),
        }
