"""
Hiring metrics report API.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.api.deps.reports import parse_metrics_filter
from app.core.exceptions import InvalidFilterError, MetricsError
from app.database_layer.db_config import get_db
from app.schemas.metrics import MetricsData, MetricsFilter
from app.services.reports import MetricsService

router = APIRouter(prefix="/reports/metrics", tags=["reports:metrics"])


@router.get("", response_model=MetricsData, response_model_by_alias=True)
def get_metrics(
    filters: MetricsFilter = Depends(parse_metrics_filter),
    db: Session = Depends(get_db),
):
    try:
        return MetricsService(db).get_metrics(filters)
    except InvalidFilterError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except MetricsError as e:
        raise HTTPException(status_code=500, detail=str(e))
