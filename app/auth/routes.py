# =============================================================================
# app/auth/routes.py - Authentication Routes
# =============================================================================
# Login page, login form and the guarded dashboard.
#
# GET /admin is ranked:
#   1. Admin guard   -> administrator greeting
#   2. User guard    -> simple user greeting
#   3. (no guard)    -> 303 redirect to the login page
# =============================================================================

import logging
from pathlib import Path
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, PlainTextResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from app.auth.dependencies import get_admin, get_user
from app.auth.models import Principal, TokenResponse
from app.config import settings

logger = logging.getLogger(__name__)

router = APIRouter()

templates = Jinja2Templates(directory=Path(__file__).resolve().parent.parent / "templates")


@router.get("/admin", response_class=PlainTextResponse)
async def dashboard(
    request: Request,
    admin: Optional[Principal] = Depends(get_admin),
    user: Optional[Principal] = Depends(get_user),
):
    """
    Greet the caller according to their token.

    Redirects to the login page when no bearer token is sent.
    """
    if admin is not None:
        return "Welcome, administrator!"
    if user is not None:
        return "Welcome, simple user!"
    return RedirectResponse(request.url_for("login_page").path, status_code=303)


@router.get("/login", response_class=HTMLResponse, name="login_page")
async def login_page(request: Request):
    """Render the login form."""
    return templates.TemplateResponse(request, "login.html", {})


@router.post("/login", response_model=TokenResponse)
async def login(
    email: Annotated[str, Form()],
    password: Annotated[str, Form()],
) -> TokenResponse:
    """
    Exchange the login form for a bearer token.

    Returns the admin token for the admin password and the guest token
    for anything else. Missing fields are answered with 422.
    """
    if password == settings.ADMIN_PASSWORD:
        logger.info(f"Administrator login: {email}")
        return TokenResponse(token=settings.ADMIN_TOKEN)

    logger.info(f"Guest login: {email}")
    return TokenResponse(token=settings.GUEST_TOKEN)
