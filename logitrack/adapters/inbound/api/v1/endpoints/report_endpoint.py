# logitrack/adapters/inbound/api/v1/endpoints/report_endpoint.py

from typing import Optional
from fastapi import APIRouter, Depends, Query

from logitrack.adapters.inbound.api.deps import get_actor, get_report_use_cases
from logitrack.application.dtos import ReportSummaryOutput
from logitrack.application.use_cases import ReportUseCases
from logitrack.domain.models import Actor
from logitrack.domain.services.query_service import TimeFrame

router = APIRouter()


@router.get(
    "/summary",
    response_model=ReportSummaryOutput,
    summary="Dashboard Summary - Financial figures for a period",
    description="CUSTOM requires both startDate and endDate. Weeks run from Sunday to Saturday.",
)
async def get_summary(
        timeframe: TimeFrame = Query(TimeFrame.MONTHLY),
        start_date: Optional[str] = Query(None, alias="startDate"),
        end_date: Optional[str] = Query(None, alias="endDate"),
        actor: Actor = Depends(get_actor),
        reports: ReportUseCases = Depends(get_report_use_cases),
):
    return await reports.summary(actor, timeframe, start_date, end_date)
