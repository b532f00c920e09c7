"""Jinja2 view renderer with the locals every page sees, plus the redirect helper."""
from fastapi import Request, status
from fastapi.responses import RedirectResponse
from fastapi.templating import Jinja2Templates

from app.core.config import settings


def _session_locals(request: Request) -> dict:
    return {
        "appName": settings.APP_NAME,
        "copyrightYear": settings.COPYRIGHT_YEAR,
        "postNeoType": settings.POST_NEO_TYPE,
        "loggedIn": request.session.get("loggedIn", False),
        "userId": request.session.get("userId", ""),
    }


templates = Jinja2Templates(directory=settings.TEMPLATES_DIR, context_processors=[_session_locals])


def redirect_to(url: str) -> RedirectResponse:
    """302 so browsers follow a form POST with a GET."""
    return RedirectResponse(url, status_code=status.HTTP_302_FOUND)
