# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: the directory page.
Thin HTTP layer. DirectoryService builds the list, PageRenderer draws it.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse, PlainTextResponse

from app.core.dependencies import get_directory_service, get_page_renderer
from app.core.exceptions import DirectoryError
from app.core.logging import get_logger
from app.services.directory_service import DirectoryService
from app.services.page_renderer import PageRenderer

logger = get_logger(__name__)

router = APIRouter(tags=["Directory"])

RENDER_ERROR_MESSAGE = "Oops. That's embarrassing. Please try again later."


@router.get("/", response_class=HTMLResponse)
def index(
    service: DirectoryService = Depends(get_directory_service),
    renderer: PageRenderer = Depends(get_page_renderer),
):
    """Render every listed member of the workspace."""
    try:
        directory = service.build_directory()
    except DirectoryError as e:
        logger.warning("Directory unavailable: %s", e.message)
        return PlainTextResponse(e.message, status_code=500)

    try:
        html = renderer.render(directory)
    except Exception:
        logger.exception("Failed to execute index template")
        return PlainTextResponse(RENDER_ERROR_MESSAGE, status_code=500)
    return HTMLResponse(html)
