"""Rendered pages: home feed, own profile, error page."""
from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_current_user, get_current_user_optional
from app.api.views import templates
from app.db.session import get_db
from app.models.user import User
from app.services.feed_service import get_feed_posts, get_user_posts

router = APIRouter(tags=["pages"])


@router.get("/")
async def home(
    request: Request,
    current_user: User | None = Depends(get_current_user_optional),
    db: AsyncSession = Depends(get_db),
):
    posts = await get_feed_posts(db)
    return templates.TemplateResponse(request, "home.html", {"posts": posts, "user": current_user})


@router.get("/profile")
async def profile(
    request: Request,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    posts = await get_user_posts(db, current_user.id)
    # One-shot flash, cleared as soon as it is shown
    deleted_post = request.session.pop("deletedPost", None)
    return templates.TemplateResponse(
        request,
        "profile.html",
        {"user": current_user, "posts": posts, "deletedPost": deleted_post},
    )


@router.get("/error")
async def error_page(request: Request):
    return templates.TemplateResponse(request, "error.html")
