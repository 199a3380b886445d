"""Handlers for the public landing page."""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from src.linkshort.auth.dependencies import get_optional_user
from src.linkshort.auth.models import SessionUser
from src.linkshort.config import LANDING_PATH
from src.linkshort.features.landing.content import get_landing_content
from src.linkshort.shell import render_page

router = APIRouter()


@router.get(LANDING_PATH, response_class=HTMLResponse, name="landing")
async def landing_page(
    request: Request,
    current_user: SessionUser | None = Depends(get_optional_user),
):
    """
    Render the marketing landing page.

    The page content never depends on the session; the user is only passed
    through so the layout can pick its header controls.
    """
    return render_page(
        request,
        "landing.html",
        current_user,
        {"content": get_landing_content()},
    )
