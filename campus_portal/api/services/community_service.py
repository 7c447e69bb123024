"""
HALL OF ECHOES - Community forum with moderation

FEATURES:
✅ Posts newest first, comments oldest first
✅ Banned users (matched by email) cannot post, comment or flag
✅ Anyone may flag a post; Admin/Authority delete posts and comments
✅ Admin/Authority ban a post's author by looking up their profile email
✅ Relative timestamps for the feed ("5m ago", "3h ago", then the date)
"""

import datetime
import logging
from typing import List, Optional

from campus_portal.api.data_service import DataServiceClient
from campus_portal.core.errors import NotFoundError, PermissionDeniedError, ValidationError
from campus_portal.core.models.records import BannedUser, Comment, Post, PostDraft
from campus_portal.core.models.users import User

logger = logging.getLogger(__name__)

POSTS_TABLE = "posts"
COMMENTS_TABLE = "comments"
BANS_TABLE = "banned_users"
PROFILES_TABLE = "profiles"

DEFAULT_BAN_REASON = "Violation of community guidelines"


def time_ago(created_at: datetime.datetime, now: Optional[datetime.datetime] = None) -> str:
    """Relative age of a post or comment"""
    if now is None:
        now = datetime.datetime.now(datetime.timezone.utc)
    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=datetime.timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=datetime.timezone.utc)

    minutes = int((now - created_at).total_seconds() // 60)
    if minutes < 60:
        return f"{max(minutes, 0)}m ago"
    hours = minutes // 60
    if hours < 24:
        return f"{hours}h ago"
    return created_at.date().isoformat()


class CommunityForum:
    """Forum reads, writes and moderation actions"""

    def __init__(self, client: DataServiceClient):
        self.client = client

    async def is_banned(self, user: User) -> bool:
        row = await self.client.select_one(BANS_TABLE, [("email", "eq", user.email)])
        return row is not None

    async def _ensure_not_banned(self, user: User, action: str):
        if await self.is_banned(user):
            logger.warning("Banned user %s tried to %s", user.email, action)
            raise PermissionDeniedError(f"Banned users cannot {action}")

    @staticmethod
    def _ensure_moderator(user: User, action: str):
        if not user.is_moderator:
            raise PermissionDeniedError(f"Only Admin or Authority can {action}")

    async def list_posts(self) -> List[Post]:
        rows = await self.client.select(POSTS_TABLE, order="created_at", ascending=False)
        return [Post(**row) for row in rows]

    async def create_post(self, actor: User, draft: PostDraft) -> Post:
        await self._ensure_not_banned(actor, "post")
        row = {
            "title": draft.title,
            "content": draft.content,
            "author_id": actor.id,
            "author_name": actor.name,
            "author_role": actor.role,
            "likes": 0,
            "is_flagged": False,
        }
        created = await self.client.insert(POSTS_TABLE, [row])
        if not created:
            raise NotFoundError("Post was not returned by the data service")
        logger.info("Post '%s' created by %s", draft.title, actor.name)
        return Post(**created[0])

    async def flag_post(self, actor: User, post_id: str) -> Post:
        await self._ensure_not_banned(actor, "flag posts")
        rows = await self.client.update(POSTS_TABLE, {"is_flagged": True}, [("id", "eq", post_id)])
        if not rows:
            raise NotFoundError(f"Post {post_id} not found")
        logger.info("Post %s flagged by %s", post_id, actor.name)
        return Post(**rows[0])

    async def delete_post(self, actor: User, post_id: str):
        self._ensure_moderator(actor, "delete posts")
        await self.client.delete(POSTS_TABLE, [("id", "eq", post_id)])
        logger.info("Post %s deleted by %s", post_id, actor.name)

    async def delete_comment(self, actor: User, comment_id: str):
        self._ensure_moderator(actor, "delete comments")
        await self.client.delete(COMMENTS_TABLE, [("id", "eq", comment_id)])
        logger.info("Comment %s deleted by %s", comment_id, actor.name)

    async def ban_author(self, actor: User, author_id: str, reason: str = "") -> BannedUser:
        """
        Ban the author of a post or comment

        Args:
            actor: Moderator issuing the ban
            author_id: Profile id of the author
            reason: Shown to the banned user; defaults to the guidelines notice

        Returns:
            The stored ban
        """
        self._ensure_moderator(actor, "ban users")

        profile = await self.client.select_one(PROFILES_TABLE, [("id", "eq", author_id)], columns="email")
        if profile is None or not profile.get("email"):
            raise NotFoundError(f"Could not find email for user {author_id}")

        ban = BannedUser(
            email=profile["email"],
            reason=reason.strip() or DEFAULT_BAN_REASON,
            banned_by=actor.name,
        )
        await self.client.insert(BANS_TABLE, [ban.model_dump()])
        logger.warning("%s banned %s: %s", actor.name, ban.email, ban.reason)
        return ban

    async def list_comments(self, post_id: str) -> List[Comment]:
        rows = await self.client.select(
            COMMENTS_TABLE,
            [("post_id", "eq", post_id)],
            order="created_at",
            ascending=True,
        )
        return [Comment(**row) for row in rows]

    async def add_comment(self, actor: User, post_id: str, content: str) -> Comment:
        if not content or not content.strip():
            raise ValidationError("Comment must not be blank")
        await self._ensure_not_banned(actor, "comment")

        row = {
            "post_id": post_id,
            "content": content.strip(),
            "author_id": actor.id,
            "author_name": actor.name,
        }
        created = await self.client.insert(COMMENTS_TABLE, [row])
        if not created:
            raise NotFoundError("Comment was not returned by the data service")
        return Comment(**created[0])
