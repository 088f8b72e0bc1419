"""
Query helpers for the metrics dashboard.
Filter handling lives here so the metrics service only deals with fetched rows.
"""

from __future__ import annotations

import logging
import re
from datetime import date, datetime
from typing import List, Optional

from sqlalchemy.orm import Query, Session, joinedload, selectinload

from app.core.exceptions import InvalidFilterError
from app.database_layer.db_model import DimProcess, DimVacancy, FactHiringProcess
from app.schemas.metrics import MetricsFilter

logger = logging.getLogger("app_logger")

DATE_LAYOUT = "%Y-%m-%d"
DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def parse_filter_date(field_name: str, value: Optional[str]) -> Optional[date]:
    if not value:
        return None
    message = f"could not parse `{field_name}` {value!r}: expected YYYY-MM-DD"
    # strptime alone accepts single-digit months and days
    if not DATE_PATTERN.fullmatch(value):
        logger.error(message)
        raise InvalidFilterError(message)
    try:
        return datetime.strptime(value, DATE_LAYOUT).date()
    except ValueError as exc:
        logger.error(message)
        raise InvalidFilterError(message) from exc


def build_hiring_process_query(db: Session, filters: MetricsFilter) -> Query:
    """
    Build the fact query for a filter.
    Both dates are parsed before the session is touched, so a bad date never
    reaches the database.
    """
    start_date = parse_filter_date("startDate", filters.start_date)
    end_date = parse_filter_date("endDate", filters.end_date)

    query = db.query(FactHiringProcess).options(
        joinedload(FactHiringProcess.dim_vacancy),
        joinedload(FactHiringProcess.dim_process),
        selectinload(FactHiringProcess.hiring_process_candidates),
    )

    if filters.hiring_process:
        query = query.filter(
            FactHiringProcess.dim_process.has(DimProcess.title.contains(filters.hiring_process, autoescape=True))
        )
    if filters.vacancy:
        query = query.filter(
            FactHiringProcess.dim_vacancy.has(DimVacancy.title.contains(filters.vacancy, autoescape=True))
        )
    if start_date:
        query = query.filter(FactHiringProcess.dim_vacancy.has(DimVacancy.closing_date >= start_date))
    if end_date:
        query = query.filter(FactHiringProcess.dim_vacancy.has(DimVacancy.closing_date <= end_date))

    return query.order_by(FactHiringProcess.id)


def fetch_hiring_processes(db: Session, filters: MetricsFilter) -> List[FactHiringProcess]:
    rows = build_hiring_process_query(db, filters).all()
    logger.debug(f"Fetched {len(rows)} hiring process rows")
    return rows
