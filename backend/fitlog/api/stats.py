"""
Stats API endpoints.

Every request re-reads the full store; nothing is cached between calls.
"""
from datetime import date

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from fitlog.core.config import settings
from fitlog.core.database import get_db
from fitlog.core.logging import get_logger
from fitlog.schemas.stats import ChartResponse, StatsResponse
from fitlog.services.stats import (
    DEFAULT_WINDOW_DAYS,
    StatsReport,
    build_stats_report,
    chart_bars,
    fetch_snapshot,
    prepare_snapshot,
)

logger = get_logger(__name__)
router = APIRouter()


def get_reference_date() -> date:
    """Last day of the reporting window: today in the server's local calendar."""
    return date.today()


async def _compute_report(db: AsyncSession, reference_date: date) -> StatsReport:
    snapshot = await fetch_snapshot(db)
    entries = prepare_snapshot(snapshot, settings.MALFORMED_RECORD_POLICY)
    report = build_stats_report(entries, reference_date, DEFAULT_WINDOW_DAYS)
    
    logger.info(
        "Computed workout stats",
        records=len(entries),
        skipped=len(snapshot) - len(entries),
        window_start=report.daily[0].date,
        window_end=report.daily[-1].date,
    )
    return report


# ========================================
# API Endpoints
# ========================================

@router.get("", response_model=StatsResponse)
async def get_stats(
    reference_date: date = Depends(get_reference_date),
    db: AsyncSession = Depends(get_db),
):
    """
    Lifetime totals, per-type breakdown and the trailing 7-day series.
    """
    report = await _compute_report(db, reference_date)
    return report.to_dict()


@router.get("/chart", response_model=ChartResponse)
async def get_stats_chart(
    reference_date: date = Depends(get_reference_date),
    db: AsyncSession = Depends(get_db),
):
    """
    Bar geometry for the trailing 7-day chart.
    """
    report = await _compute_report(db, reference_date)
    return chart_bars(report.daily)
