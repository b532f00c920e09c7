"""Auth endpoints: register, login, logout. Identity is the username alone."""
import logging
from urllib.parse import quote

from fastapi import APIRouter, Depends, Form, Request
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.views import redirect_to, templates
from app.db.session import get_db
from app.schemas.user import UserCreate
from app.services.auth_service import create_user, get_user_by_username

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


def _form_error(path: str, message: str):
    return redirect_to(f"{path}?error={quote(message)}")


@router.get("/register")
async def register_form(request: Request, error: str | None = None):
    return templates.TemplateResponse(request, "login_register.html", {"regError": error})


@router.get("/login")
async def login_form(request: Request, error: str | None = None):
    return templates.TemplateResponse(request, "login_register.html", {"loginError": error})


@router.post("/register")
async def register(
    username: str = Form(""),
    db: AsyncSession = Depends(get_db),
):
    logger.info("Register attempt: %s", username)
    if not username.strip():
        return _form_error("/register", "Username is required")
    try:
        data = UserCreate(username=username)
    except ValidationError:
        return _form_error("/register", "Username must be at most 50 characters")
    user = await create_user(db, data)
    if user is None:
        logger.info("Register failed: username %s already exists", username)
        return _form_error("/register", "Username already exists")
    await db.commit()
    logger.info("Register success: %s %s", user.id, user.username)
    return redirect_to("/login")


@router.post("/login")
async def login(
    request: Request,
    username: str = Form(""),
    db: AsyncSession = Depends(get_db),
):
    logger.info("Login attempt: %s", username)
    user = await get_user_by_username(db, username) if username else None
    if not user:
        logger.info("Login failed: unknown username")
        return _form_error("/login", "Invalid username")
    request.session["userId"] = user.id
    request.session["loggedIn"] = True
    logger.info("Login success: %s %s", user.id, user.username)
    return redirect_to("/")


@router.get("/logout")
async def logout(request: Request):
    request.session.clear()
    return redirect_to("/")
