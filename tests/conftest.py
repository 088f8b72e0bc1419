"""Shared test fixtures."""

from __future__ import annotations

import os
import tempfile

# Must be set before anything under `app` is imported
os.environ.setdefault("APP_ENV", "dev")
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("LOG_DIR", os.path.join(tempfile.gettempdir(), "hiring-metrics-tests"))

from datetime import date  # noqa: E402

import pytest  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from app.database_layer import (  # noqa: E402
    CandidateStatus,
    DimProcess,
    DimVacancy,
    FactHiringProcess,
    HiringProcessCandidate,
    init_db,
)


@pytest.fixture()
def engine():
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=eng)
    yield eng
    eng.dispose()


@pytest.fixture()
def db(engine):
    session = sessionmaker(bind=engine, autoflush=False)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def add_process(db):
    """Insert a fact row with its vacancy, process and candidates; returns the fact."""

    def _add(
        *,
        process_title: str = "Backend Engineer",
        vacancy_title: str = "Senior Backend Developer",
        closing_date: date | None = date(2024, 3, 15),
        started_at: date | None = date(2024, 2, 1),
        finished_at: date | None = None,
        candidates: tuple[CandidateStatus, ...] = (),
    ) -> FactHiringProcess:
        fact = FactHiringProcess(
            dim_vacancy=DimVacancy(title=vacancy_title, closing_date=closing_date),
            dim_process=DimProcess(title=process_title),
            started_at=started_at,
            finished_at=finished_at,
        )
        for idx, status in enumerate(candidates):
            fact.hiring_process_candidates.append(
                HiringProcessCandidate(name=f"Candidate {idx}", status=status)
            )
        db.add(fact)
        db.commit()
        return fact

    return _add
