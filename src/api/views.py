"""
HTML view helpers shared by the page routes and the checkout endpoints.
"""

from pathlib import Path
from typing import Any, Dict, Optional

from fastapi import Request
from fastapi.templating import Jinja2Templates

BASE_DIR = Path(__file__).parent.parent.parent
TEMPLATES_DIR = BASE_DIR / "templates"
STATIC_DIR = BASE_DIR / "static"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def render_page(request: Request, name: str, context: Optional[Dict[str, Any]] = None, status_code: int = 200):
    ctx: Dict[str, Any] = {"site_title": request.app.state.config.site.title}
    ctx.update(context or {})
    return templates.TemplateResponse(request, name, ctx, status_code=status_code)


def render_error(request: Request, message: str, status_code: int = 500):
    return render_page(request, "error.html", {"message": message}, status_code=status_code)
