"""API dependencies: session identity, db session."""
from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session import get_db
from app.models.user import User
from app.services.auth_service import get_user_by_id


class LoginRequired(Exception):
    """Raised by the auth guard; the app turns it into a redirect to /login."""


async def get_current_user_optional(
    request: Request,
    db: AsyncSession = Depends(get_db),
) -> User | None:
    user_id = request.session.get("userId")
    if not user_id:
        return None
    return await get_user_by_id(db, int(user_id))


async def get_current_user(
    user: User | None = Depends(get_current_user_optional),
) -> User:
    if user is None:
        raise LoginRequired()
    return user
