"""Tests for the metrics service facade: end-to-end runs and failure handling."""

from __future__ import annotations

from datetime import date
from unittest.mock import MagicMock, patch

import pytest
from sqlalchemy.exc import OperationalError

from app.core.exceptions import AggregationError, InvalidFilterError, MetricsAggregationError, MetricsQueryError
from app.database_layer import CandidateStatus, DimProcess, DimVacancy, FactHiringProcess
from app.schemas.metrics import MetricsData, MetricsFilter
from app.services.reports import MetricsService

TODAY = date(2024, 6, 1)


@pytest.fixture()
def backend_and_noise(add_process):
    add_process(
        process_title="Backend Engineer",
        closing_date=date(2024, 3, 15),
        started_at=date(2024, 2, 1),
        finished_at=date(2024, 3, 10),
        candidates=(CandidateStatus.hired, CandidateStatus.declined),
    )
    add_process(
        process_title="Frontend Designer",
        vacancy_title="UI Designer",
        closing_date=date(2023, 11, 1),
        started_at=date(2023, 10, 1),
        finished_at=date(2023, 10, 21),
        candidates=(CandidateStatus.hired,),
    )


def test_end_to_end_single_row(db, backend_and_noise):
    filters = MetricsFilter(
        vacancy="",
        hiring_process="Backend",
        start_date="2024-01-01",
        end_date="2024-12-31",
    )
    data = MetricsService(db).get_metrics(filters, today=TODAY)

    assert data.card_infos.total_processes == 1
    assert data.card_infos.closed_processes == 1
    assert data.card_infos.total_candidates == 2
    assert data.card_infos.hired_candidates == 1
    assert data.card_infos.average_hiring_time == 38.0
    assert data.vacancy_summary.closed == 1
    assert data.average_hiring_time.march == 38.0
    assert data.average_hiring_time.november == 0.0


def test_unfiltered_sees_every_row(db, backend_and_noise):
    data = MetricsService(db).get_metrics(MetricsFilter(), today=TODAY)
    assert data.card_infos.total_processes == 2
    assert data.average_hiring_time.november == 20.0


def test_serializes_with_dashboard_keys(db, backend_and_noise):
    payload = MetricsService(db).get_metrics(MetricsFilter(), today=TODAY).model_dump(by_alias=True)
    assert set(payload) == {"vacancyStatus", "cards", "averageHiringTime"}
    assert payload["cards"]["totalProcesses"] == 2
    assert payload["vacancyStatus"] == {"open": 0, "analyzing": 0, "closed": 2}


def test_idempotent(db, backend_and_noise):
    service = MetricsService(db)
    filters = MetricsFilter(hiring_process="Backend")
    assert service.get_metrics(filters, today=TODAY) == service.get_metrics(filters, today=TODAY)


def test_today_defaults_to_report_timezone(db, backend_and_noise):
    with patch("app.services.reports.metrics.report_today", return_value=TODAY) as today:
        data = MetricsService(db).get_metrics(MetricsFilter())
    today.assert_called_once()
    assert isinstance(data, MetricsData)


def test_invalid_date_never_queries():
    db = MagicMock()
    with pytest.raises(InvalidFilterError, match="startDate"):
        MetricsService(db).get_metrics(MetricsFilter(start_date="2024-13-40"), today=TODAY)
    db.query.assert_not_called()


def test_query_failure_skips_aggregation():
    boom = OperationalError("SELECT 1", {}, Exception("connection refused"))
    with patch("app.services.reports.metrics.fetch_hiring_processes", side_effect=boom), \
            patch("app.services.reports.metrics.compute_card_infos") as cards:
        with pytest.raises(MetricsQueryError, match="could not retrieve hiring process data") as exc_info:
            MetricsService(MagicMock()).get_metrics(MetricsFilter(), today=TODAY)
    cards.assert_not_called()
    assert exc_info.value.__cause__ is boom


def test_every_failing_aggregation_is_reported():
    broken = FactHiringProcess(id=7, dim_vacancy=None, dim_process=None)
    with patch("app.services.reports.metrics.fetch_hiring_processes", return_value=[broken]):
        with pytest.raises(MetricsAggregationError) as exc_info:
            MetricsService(MagicMock()).get_metrics(MetricsFilter(), today=TODAY)

    err = exc_info.value
    assert len(err.errors) == 3
    message = str(err)
    assert "card info" in message
    assert "vacancy status summary" in message
    assert "average hiring time" in message
    for wrapped in err.errors:
        assert isinstance(wrapped.__cause__, AggregationError)
        assert "no vacancy" in str(wrapped.__cause__) or "no process" in str(wrapped.__cause__)


def test_partial_failure_returns_no_data():
    backwards = FactHiringProcess(
        id=3,
        dim_vacancy=DimVacancy(title="Vacancy", closing_date=date(2024, 3, 15)),
        dim_process=DimProcess(title="Process"),
        started_at=date(2024, 3, 10),
        finished_at=date(2024, 3, 1),
    )
    with patch("app.services.reports.metrics.fetch_hiring_processes", return_value=[backwards]):
        with pytest.raises(MetricsAggregationError) as exc_info:
            MetricsService(MagicMock()).get_metrics(MetricsFilter(), today=TODAY)

    message = str(exc_info.value)
    assert len(exc_info.value.errors) == 2
    assert "card info" in message
    assert "average hiring time" in message
    assert "vacancy status summary" not in message
