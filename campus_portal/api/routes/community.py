"""Hall of Echoes: forum posts, comments and moderation"""

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from campus_portal.api.data_service import DataServiceClient
from campus_portal.api.deps import get_data_client, require_view
from campus_portal.api.services.community_service import CommunityForum, time_ago
from campus_portal.core.models.records import Comment, Post, PostDraft
from campus_portal.core.models.users import User

router = APIRouter(prefix="/community", tags=["community"])

require_community = require_view("community")


class CommentDraft(BaseModel):
    content: str = Field("", description="Comment body")


class BanRequest(BaseModel):
    author_id: str = Field(..., description="Profile id of the author to ban")
    reason: str = Field("", description="Reason shown to the banned user")


def _with_age(record) -> dict:
    payload = record.model_dump()
    payload["time_ago"] = time_ago(record.created_at) if record.created_at else None
    return payload


@router.get("/posts")
async def list_posts(
    user: User = Depends(require_community),
    client: DataServiceClient = Depends(get_data_client),
):
    return [_with_age(p) for p in await CommunityForum(client).list_posts()]


@router.post("/posts", status_code=status.HTTP_201_CREATED)
async def create_post(
    draft: PostDraft,
    user: User = Depends(require_community),
    client: DataServiceClient = Depends(get_data_client),
):
    post: Post = await CommunityForum(client).create_post(user, draft)
    return _with_age(post)


@router.post("/posts/{post_id}/flag")
async def flag_post(
    post_id: str,
    user: User = Depends(require_community),
    client: DataServiceClient = Depends(get_data_client),
):
    return (await CommunityForum(client).flag_post(user, post_id)).model_dump()


@router.delete("/posts/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_post(
    post_id: str,
    user: User = Depends(require_community),
    client: DataServiceClient = Depends(get_data_client),
):
    await CommunityForum(client).delete_post(user, post_id)


@router.get("/posts/{post_id}/comments")
async def list_comments(
    post_id: str,
    user: User = Depends(require_community),
    client: DataServiceClient = Depends(get_data_client),
):
    return [_with_age(c) for c in await CommunityForum(client).list_comments(post_id)]


@router.post("/posts/{post_id}/comments", status_code=status.HTTP_201_CREATED)
async def add_comment(
    post_id: str,
    body: CommentDraft,
    user: User = Depends(require_community),
    client: DataServiceClient = Depends(get_data_client),
):
    comment: Comment = await CommunityForum(client).add_comment(user, post_id, body.content)
    return _with_age(comment)


@router.delete("/comments/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_comment(
    comment_id: str,
    user: User = Depends(require_community),
    client: DataServiceClient = Depends(get_data_client),
):
    await CommunityForum(client).delete_comment(user, comment_id)


@router.post("/bans", status_code=status.HTTP_201_CREATED)
async def ban_author(
    body: BanRequest,
    user: User = Depends(require_community),
    client: DataServiceClient = Depends(get_data_client),
):
    ban = await CommunityForum(client).ban_author(user, body.author_id, body.reason)
    return ban.model_dump()


@router.get("/bans/me")
async def ban_status(
    user: User = Depends(require_community),
    client: DataServiceClient = Depends(get_data_client),
):
    return {"banned": await CommunityForum(client).is_banned(user)}
