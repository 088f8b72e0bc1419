from .db_config import Base, SessionLocal, get_db, init_db
from .db_model import (
    CandidateStatus,
    DimProcess,
    DimVacancy,
    FactHiringProcess,
    HiringProcessCandidate,
)

__all__ = [
    "Base",
    "SessionLocal",
    "get_db",
    "init_db",
    "CandidateStatus",
    "DimProcess",
    "DimVacancy",
    "FactHiringProcess",
    "HiringProcessCandidate",
]
