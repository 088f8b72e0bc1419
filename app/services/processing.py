"""
Aggregations behind the metrics dashboard.

Each derivation is a pure function over the fetched fact rows and a reference
date. They never touch the session, so the same row list can feed all three.
"""

from __future__ import annotations

from collections import defaultdict
from datetime import date, timedelta
from typing import Dict, List, Optional, Sequence

from app.core.exceptions import AggregationError
from app.database_layer.db_model import CandidateStatus, FactHiringProcess
from app.schemas.metrics import AverageHiringTimePerMonth, CardInfos, VacancyStatusSummary

DEADLINE_WINDOW_DAYS = 7

MONTH_FIELDS = (
    "january", "february", "march", "april", "may", "june",
    "july", "august", "september", "october", "november", "december",
)


def _require_vacancy(row: FactHiringProcess):
    if row.dim_vacancy is None:
        raise AggregationError(f"hiring process {row.id} has no vacancy")
    return row.dim_vacancy


def _require_process(row: FactHiringProcess):
    if row.dim_process is None:
        raise AggregationError(f"hiring process {row.id} has no process")
    return row.dim_process


def hiring_time_days(row: FactHiringProcess) -> Optional[int]:
    """Days between start and finish, or None while the process is still running."""
    if row.finished_at is None:
        return None
    if row.started_at is None:
        raise AggregationError(f"hiring process {row.id} finished without a start date")
    days = (row.finished_at - row.started_at).days
    if days < 0:
        raise AggregationError(
            f"hiring process {row.id} finished ({row.finished_at}) before it started ({row.started_at})"
        )
    return days


def classify_vacancy_status(row: FactHiringProcess, today: date) -> str:
    closing_date = _require_vacancy(row).closing_date
    if closing_date is None or closing_date >= today:
        return "open"
    if row.finished_at is None:
        return "analyzing"
    return "closed"


def compute_card_infos(rows: Sequence[FactHiringProcess], today: date) -> CardInfos:
    deadline = today + timedelta(days=DEADLINE_WINDOW_DAYS)
    cards = CardInfos()
    hiring_times: List[int] = []

    for row in rows:
        vacancy = _require_vacancy(row)
        _require_process(row)
        cards.total_processes += 1

        days = hiring_time_days(row)
        if days is not None:
            cards.closed_processes += 1
            hiring_times.append(days)
        else:
            cards.open_processes += 1
            if vacancy.closing_date is not None:
                if vacancy.closing_date < today:
                    cards.expired_processes += 1
                elif vacancy.closing_date <= deadline:
                    cards.approaching_deadline += 1

        for candidate in row.hiring_process_candidates:
            cards.total_candidates += 1
            if candidate.status == CandidateStatus.hired:
                cards.hired_candidates += 1

    if hiring_times:
        cards.average_hiring_time = round(sum(hiring_times) / len(hiring_times), 2)
    return cards


def generate_vacancy_status_summary(rows: Sequence[FactHiringProcess], today: date) -> VacancyStatusSummary:
    counts: Dict[str, int] = {"open": 0, "analyzing": 0, "closed": 0}
    for row in rows:
        counts[classify_vacancy_status(row, today)] += 1
    return VacancyStatusSummary(**counts)


def generate_average_hiring_time(rows: Sequence[FactHiringProcess]) -> AverageHiringTimePerMonth:
    buckets: Dict[int, List[int]] = defaultdict(list)
    for row in rows:
        closing_date = _require_vacancy(row).closing_date
        days = hiring_time_days(row)
        if days is None or closing_date is None:
            continue
        buckets[closing_date.month].append(days)

    averages = {
        MONTH_FIELDS[month - 1]: round(sum(values) / len(values), 2)
        for month, values in buckets.items()
    }
    return AverageHiringTimePerMonth(**averages)
