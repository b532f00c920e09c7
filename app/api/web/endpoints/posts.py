"""Post creation, likes and deletion."""
import logging

from fastapi import APIRouter, Depends, Form, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_current_user
from app.api.views import redirect_to
from app.db.session import get_db
from app.models.user import User
from app.schemas.post import PostCreate
from app.services.feed_service import create_post, delete_post, like_post

logger = logging.getLogger(__name__)

router = APIRouter(tags=["posts"])

DELETED_POST_MESSAGE = "Post deleted successfully"


@router.post("/posts")
async def create_post_endpoint(
    title: str = Form(""),
    content: str = Form(""),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    post = await create_post(db, current_user.id, PostCreate(title=title, content=content))
    await db.commit()
    logger.info("Post %s created by %s", post.id, current_user.username)
    return redirect_to("/")


@router.post("/like/{post_id}")
async def like_post_endpoint(
    post_id: int,
    request: Request,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    if await like_post(db, post_id, current_user.id):
        await db.commit()
        logger.info("Post %s liked by %s", post_id, current_user.username)
    return redirect_to(request.headers.get("referer") or "/")


@router.post("/delete/{post_id}")
async def delete_post_endpoint(
    post_id: int,
    request: Request,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    if await delete_post(db, post_id, current_user.id):
        await db.commit()
        logger.info("Post %s deleted by %s", post_id, current_user.username)
    request.session["deletedPost"] = DELETED_POST_MESSAGE
    return redirect_to("/profile")
