"""
Helper dependencies for report endpoints.
Parses query parameters into MetricsFilter.
"""

from __future__ import annotations

from typing import Optional

from fastapi import Query

from app.schemas.metrics import MetricsFilter


def parse_metrics_filter(
    hiring_process: Optional[str] = Query(None, alias="hiringProcess", description="Process title substring"),
    vacancy: Optional[str] = Query(None, description="Vacancy title substring"),
    start_date: Optional[str] = Query(None, alias="startDate", description="YYYY-MM-DD, inclusive"),
    end_date: Optional[str] = Query(None, alias="endDate", description="YYYY-MM-DD, inclusive"),
) -> MetricsFilter:
    """Dates stay as strings here; the query builder reports malformed values."""
    return MetricsFilter(
        hiring_process=hiring_process,
        vacancy=vacancy,
        start_date=start_date,
        end_date=end_date,
    )
