"""Opportunities board: faculty publish calls, everyone browses and applies."""

import logging
from typing import Any, Dict, List

from campus_portal.api.data_service import DataServiceClient
from campus_portal.core.errors import NotFoundError, PermissionDeniedError
from campus_portal.core.models.records import Opportunity, OpportunityDraft
from campus_portal.core.models.users import User

logger = logging.getLogger(__name__)

OPPORTUNITIES_TABLE = "opportunities"

UNPAID = "Unpaid"


class OpportunityBoard:

    def __init__(self, client: DataServiceClient):
        self.client = client

    async def list(self) -> List[Opportunity]:
        """Open calls, nearest deadline first"""
        rows = await self.client.select(OPPORTUNITIES_TABLE, order="deadline", ascending=True)
        return [Opportunity(**row) for row in rows]

    async def publish(self, actor: User, draft: OpportunityDraft) -> List[Opportunity]:
        """Publish a call under the faculty member's name and return the refreshed board"""
        if not actor.is_faculty:
            raise PermissionDeniedError("Only faculty can publish opportunities")

        row = {
            "title": draft.title,
            "professor": actor.name,
            "type": draft.type,
            "deadline": draft.deadline,
            "stipend": draft.stipend.strip() or UNPAID,
            "tags": draft.tag_list,
        }
        await self.client.insert(OPPORTUNITIES_TABLE, [row])
        logger.info("Opportunity '%s' published by %s", draft.title, actor.name)
        return await self.list()

    async def apply(self, actor: User, opportunity_id: str) -> Dict[str, Any]:
        """
        Register interest in an opportunity

        Applications are acknowledged and logged for the professor; there is
        no applications table.
        """
        row = await self.client.select_one(OPPORTUNITIES_TABLE, [("id", "eq", opportunity_id)])
        if row is None:
            raise NotFoundError(f"Opportunity {opportunity_id} not found")
        opportunity = Opportunity(**row)

        logger.info(
            "%s (%s) applied for '%s' posted by %s",
            actor.name,
            actor.email,
            opportunity.title,
            opportunity.professor,
        )
        return {
            "opportunity_id": opportunity.id,
            "title": opportunity.title,
            "professor": opportunity.professor,
            "message": f'Application initiated for: "{opportunity.title}". '
                       f"The professor has been notified of your interest.",
        }
