"""
Hiring metrics report service.
Runs the filtered fact query once and derives every dashboard report from the same rows.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import List, Optional
from zoneinfo import ZoneInfo

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core import settings
from app.core.exceptions import AggregationError, MetricsAggregationError, MetricsQueryError
from app.repositories import fetch_hiring_processes
from app.schemas.metrics import MetricsData, MetricsFilter
from app.services.processing import (
    compute_card_infos,
    generate_average_hiring_time,
    generate_vacancy_status_summary,
)

logger = logging.getLogger("app_logger")


def report_today() -> date:
    return datetime.now(ZoneInfo(settings.REPORT_DEFAULT_TZ)).date()


def _wrap(stage: str, exc: AggregationError) -> AggregationError:
    wrapped = AggregationError(f"{stage}: {exc}")
    wrapped.__cause__ = exc
    return wrapped


class MetricsService:
    def __init__(self, db: Session):
        self.db = db

    def get_metrics(self, filters: MetricsFilter, today: Optional[date] = None) -> MetricsData:
        """
        Fetch the filtered hiring processes and build the dashboard payload.

        Raises:
            InvalidFilterError: a filter date is malformed; nothing was queried.
            MetricsQueryError: the rows could not be retrieved.
            MetricsAggregationError: one or more reports failed; lists every failure.
        """
        try:
            rows = fetch_hiring_processes(self.db, filters)
        except SQLAlchemyError as exc:
            logger.error(f"Failed to retrieve hiring process data: {exc}", exc_info=True)
            raise MetricsQueryError(f"could not retrieve hiring process data: {exc}") from exc

        today = today or report_today()
        errors: List[Exception] = []

        try:
            card_infos = compute_card_infos(rows, today)
        except AggregationError as exc:
            errors.append(_wrap("could not calculate card info", exc))

        try:
            vacancy_summary = generate_vacancy_status_summary(rows, today)
        except AggregationError as exc:
            errors.append(_wrap("could not generate vacancy status summary", exc))

        try:
            average_hiring_time = generate_average_hiring_time(rows)
        except AggregationError as exc:
            errors.append(_wrap("could not generate average hiring time", exc))

        if errors:
            error = MetricsAggregationError(errors)
            logger.error(str(error))
            raise error

        logger.info(f"Metrics computed over {len(rows)} hiring processes")
        return MetricsData(
            vacancy_summary=vacancy_summary,
            card_infos=card_infos,
            average_hiring_time=average_hiring_time,
        )
