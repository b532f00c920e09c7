"""Generated letter avatars."""
from fastapi import APIRouter
from fastapi.responses import Response

from app.services.avatar_service import generate_avatar

router = APIRouter(tags=["avatar"])


@router.get("/avatar/{username}")
def avatar(username: str):
    return Response(content=generate_avatar(username[0]), media_type="image/png")
