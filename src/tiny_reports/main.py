import logging
from fastapi import FastAPI, Request

from .core import logging_config  # noqa: F401  configures the "tiny_reports" logger
from .features.reports.router import router as reports_router

logger = logging.getLogger("tiny_reports.main")  # This logger will inherit from 'tiny_reports'


app = FastAPI(
    title="Tiny Reports API",
    description="API for generating role-filtered CSV and HTML item reports.",
    version="0.1.0",
)


@app.get("/")
async def read_root(request: Request):
    """
    Root endpoint for the API.
    """
    client_host = request.client.host if request.client else "unknown client"
    logger.info(f"Root endpoint '/' accessed by {client_host}")
    return {"message": "Welcome to the Tiny Reports API!"}


app.include_router(reports_router, prefix="/api/v1")
