"""Reporting API endpoints for tiny-reports

The caller supplies the viewer and the items in the request body; loading
items and authenticating users happen upstream of this service. Reports are
returned as text with a media type matching the requested format."""
import logging
from fastapi import APIRouter, HTTPException, status
from fastapi.responses import Response

from ...core.errors import ReportError
from .schemas import ReportFormat, ReportOutcome, ReportRequest
from .service import ReportGenerator

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/reports",
    tags=["Reports"],
    responses={400: {"description": "Rejected in strict mode"}},
)

MEDIA_TYPES = {
    ReportFormat.CSV: "text/csv",
    ReportFormat.HTML: "text/html",
    ReportFormat.UNSUPPORTED: "text/plain",
}

report_generator = ReportGenerator()


def _build(request: ReportRequest) -> ReportOutcome:
    try:
        return report_generator.build_report(request.report_type, request.user, request.items)
    except ReportError as e:
        logger.info(f"Report request rejected: {e}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.post("/generate", response_class=Response)
async def generate_report(request: ReportRequest):
    outcome = _build(request)
    return Response(content=outcome.content, media_type=MEDIA_TYPES[outcome.report_format])


@router.post("/preview", response_model=ReportOutcome)
async def preview_report(request: ReportRequest):
    return _build(request)
