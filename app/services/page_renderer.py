# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Page renderer. Turns a MemberList into the index HTML.
"""

from pathlib import Path

from fastapi.templating import Jinja2Templates
from app.metrics.prometheus import MEMBERS_RENDERED, RENDER_FAILURES
from app.models.domain import MemberList

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"
INDEX_TEMPLATE = "index.html"
PROJECT_URL = "https://github.com/tink-ab/facelist"
SLACK_ICON_URL = "https://a.slack-edge.com/436da/marketing/img/meta/favicon-32.png"


class PageRenderer:
    """Jinja2 rendering with HTML autoescaping."""

    def __init__(self, templates: Jinja2Templates | None = None) -> None:
        self._templates = templates or Jinja2Templates(directory=str(TEMPLATES_DIR))

    def render(self, directory: MemberList) -> str:
        try:
            html = self._templates.get_template(INDEX_TEMPLATE).render(
                members=directory.members,
                project_url=PROJECT_URL,
                slack_icon_url=SLACK_ICON_URL,
            )
        except Exception:
            RENDER_FAILURES.inc()
            raise
        MEMBERS_RENDERED.set(len(directory.members))
        return html
