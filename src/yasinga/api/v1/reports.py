"""Report summary, download and saved-file endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Response, status

from yasinga.api.deps import get_current_user, get_report_service
from yasinga.core.types import ReportFormat, ReportWindow
from yasinga.models.user import User
from yasinga.schemas.report import ReportFileListResult, ReportFileResponse, ReportSummaryResponse
from yasinga.services.report import ReportService
from yasinga.services.transaction import money_meta

router = APIRouter(prefix="/reports", tags=["reports"])


@router.get(
    "/summary",
    response_model=ReportSummaryResponse,
    summary="Report summary",
    description="""
    Totals for a report window.

    - **weekly**: the last 7 days
    - **monthly**: from the first day of the previous month until now

    Business and personal totals count sent money only; top categories lists
    at most five categories by amount.
    """,
)
async def get_summary(
    window: Annotated[ReportWindow, Query(description="weekly or monthly")] = ReportWindow.WEEKLY,
    current_user: User = Depends(get_current_user),
    service: ReportService = Depends(get_report_service),
) -> ReportSummaryResponse:
    summary = await service.generate_report(current_user.id, window)
    response = ReportSummaryResponse.model_validate(summary)
    response.money = money_meta()
    return response


@router.get(
    "/files",
    response_model=ReportFileListResult,
    summary="List saved reports",
    description="Reports saved by the current user, newest first.",
)
async def list_report_files(
    current_user: User = Depends(get_current_user),
    service: ReportService = Depends(get_report_service),
) -> ReportFileListResult:
    reports = service.list_reports(current_user.id)
    return ReportFileListResult(reports=reports, total=len(reports))


@router.delete(
    "/files/{filename}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete saved report",
)
async def delete_report_file(
    filename: str,
    current_user: User = Depends(get_current_user),
    service: ReportService = Depends(get_report_service),
) -> Response:
    """
    Raises:
        400: Unsafe file name (RPT_002)
        404: Report not found or saved by another user (RPT_001)
    """
    service.delete_report(current_user.id, filename)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/{window}/download",
    summary="Download report",
    description="Render the window's report as CSV or PDF.",
    response_class=Response,
)
async def download_report(
    window: ReportWindow,
    format: Annotated[ReportFormat, Query(description="pdf or csv")] = ReportFormat.PDF,
    current_user: User = Depends(get_current_user),
    service: ReportService = Depends(get_report_service),
) -> Response:
    rendered = await service.render_report(current_user.id, window, format)
    return Response(
        content=rendered.content,
        media_type=rendered.media_type,
        headers={"Content-Disposition": f'attachment; filename="{rendered.filename}"'},
    )


@router.post(
    "/{window}/save",
    response_model=ReportFileResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Save report",
    description="Render the window's report and store it with the saved reports.",
)
async def save_report(
    window: ReportWindow,
    format: Annotated[ReportFormat, Query(description="pdf or csv")] = ReportFormat.PDF,
    current_user: User = Depends(get_current_user),
    service: ReportService = Depends(get_report_service),
) -> ReportFileResponse:
    return await service.save_report(current_user.id, window, format)
