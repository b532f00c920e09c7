"""Web router aggregation."""
from fastapi import APIRouter

from app.api.web.endpoints import auth, avatar, pages, posts

web_router = APIRouter()
web_router.include_router(pages.router)
web_router.include_router(auth.router)
web_router.include_router(posts.router)
web_router.include_router(avatar.router)
