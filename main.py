# type: ignore
# pyright: reportGeneralTypeIssues=false
"""
Facelist
========
Searchable staff directory: reads the Slack workspace member list on every
request, keeps active humans whose e-mail matches the configured suffix,
sorts them by name and renders one page of faces.

Port: 8080
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.controllers.directory_controller import router as directory_router
from app.controllers.system_controller import router as system_router
from app.core.config import settings
from app.core.logging import get_logger
from app.middleware import MetricsMiddleware, RequestIDMiddleware

logger = get_logger("facelist")


@asynccontextmanager
async def lifespan(application: FastAPI):
    """Refuse to start without Slack credentials."""
    logger.info("Starting facelist")
    settings.validate()
    logger.info(
        "Serving team %s (email filter=%r)", settings.SLACK_TEAM, settings.EMAIL_FILTER
    )
    yield


app = FastAPI(
    title="Facelist",
    description="Searchable directory of Slack workspace members",
    version=settings.SERVICE_VERSION,
    lifespan=lifespan,
)

app.add_middleware(MetricsMiddleware)
app.add_middleware(RequestIDMiddleware)

app.include_router(system_router)
app.include_router(directory_router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=settings.SERVICE_PORT, log_level="info")
