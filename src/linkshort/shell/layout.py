"""Root layout rendering shared by every page."""

from pathlib import Path
from typing import Any

from fastapi import Request
from fastapi.templating import Jinja2Templates
from starlette.responses import Response

from src.linkshort.auth.models import SessionUser
from src.linkshort.config import DASHBOARD_PATH, LANDING_PATH, settings
from src.linkshort.shell.controls import build_shell

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def render_page(
    request: Request,
    template_name: str,
    user: SessionUser | None,
    context: dict[str, Any] | None = None,
    headers: dict[str, str] | None = None,
) -> Response:
    """
    Render a page template inside the root layout.

    The layout receives the site metadata and the header controls for the
    given session user; page templates only fill in their content block.

    Args:
        request: Incoming request
        template_name: Page template, relative to the templates directory
        user: Current session user, or None when signed out
        context: Extra template variables for the page
        headers: Extra response headers
    """
    page_context = {
        "site_title": settings.site_title,
        "site_description": settings.site_description,
        "landing_path": LANDING_PATH,
        "dashboard_path": DASHBOARD_PATH,
        "shell": build_shell(user),
    }
    page_context.update(context or {})
    return templates.TemplateResponse(request, template_name, page_context, headers=headers)
