# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
FastAPI dependency injection for the client, services and renderer.
"""

from app.core.config import settings
from app.services.directory_service import DirectoryService
from app.services.page_renderer import PageRenderer
from app.services.slack_client import SlackClient

# ── Singletons (stateless, safe to share across requests) ──
_slack_client = SlackClient(
    api_url=settings.SLACK_API_URL,
    token=settings.SLACK_API_TOKEN,
    team=settings.SLACK_TEAM,
)
_directory_service = DirectoryService(
    slack_client=_slack_client,
    email_filter=settings.EMAIL_FILTER,
)
_page_renderer = PageRenderer()


# ── FastAPI dependency functions ──
def get_slack_client() -> SlackClient:
    return _slack_client


def get_directory_service() -> DirectoryService:
    return _directory_service


def get_page_renderer() -> PageRenderer:
    return _page_renderer
