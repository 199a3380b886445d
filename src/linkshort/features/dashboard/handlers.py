"""Handlers for the authenticated dashboard."""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from src.linkshort.auth.dependencies import get_current_user
from src.linkshort.auth.models import SessionUser
from src.linkshort.config import DASHBOARD_PATH
from src.linkshort.services import PostHogService
from src.linkshort.shell import render_page

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(DASHBOARD_PATH, response_class=HTMLResponse, name="dashboard")
async def dashboard_page(
    request: Request,
    current_user: SessionUser = Depends(get_current_user),
):
    """
    Render the dashboard for the signed-in user.

    Requests without a session never reach this handler: the guard raises
    SignInRequired and the app redirects to the landing page.
    """
    logger.info(f"Dashboard viewed by {current_user.id}", extra={"user_id": current_user.id})
    PostHogService().capture(distinct_id=current_user.id, event="dashboard_viewed")

    # Output depends on the session, so it must never be cached
    return render_page(
        request,
        "dashboard.html",
        current_user,
        headers={"Cache-Control": "no-store"},
    )
