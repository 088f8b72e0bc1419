"""
Database Models Module

This module defines the SQLAlchemy ORM models for the hiring star schema:
- DimVacancy: Vacancy dimension (title, opening and closing dates)
- DimProcess: Hiring process definition dimension
- FactHiringProcess: One row per hiring process instance
- HiringProcessCandidate: Candidates attached to a hiring process instance

The metrics service only reads these tables.
"""

import enum
import logging

from sqlalchemy import Column, Date, Enum as SAEnum, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from app.database_layer.db_config import Base

logger = logging.getLogger("app_logger")


class CandidateStatus(enum.Enum):
    in_analysis = "in_analysis"
    interviewing = "interviewing"
    hired = "hired"
    declined = "declined"


class DimVacancy(Base):
    """Vacancy dimension used for filtering and status classification"""
    __tablename__ = 'dim_vacancy'

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    title = Column(String(255), nullable=False, index=True)
    opening_date = Column(Date, nullable=True)
    closing_date = Column(Date, nullable=True, index=True)


class DimProcess(Base):
    """Hiring process definition dimension"""
    __tablename__ = 'dim_process'

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    title = Column(String(255), nullable=False, index=True)
    description = Column(Text, nullable=True)


class FactHiringProcess(Base):
    """Fact row for a single hiring process instance"""
    __tablename__ = 'fact_hiring_process'

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    dim_vacancy_id = Column(Integer, ForeignKey('dim_vacancy.id'), nullable=False, index=True)
    dim_process_id = Column(Integer, ForeignKey('dim_process.id'), nullable=False, index=True)
    started_at = Column(Date, nullable=True)
    finished_at = Column(Date, nullable=True)

    dim_vacancy = relationship("DimVacancy", foreign_keys=[dim_vacancy_id])
    dim_process = relationship("DimProcess", foreign_keys=[dim_process_id])
    hiring_process_candidates = relationship(
        "HiringProcessCandidate",
        back_populates="fact_hiring_process",
        order_by="HiringProcessCandidate.id",
    )


class HiringProcessCandidate(Base):
    """Candidate association of a hiring process instance"""
    __tablename__ = 'hiring_process_candidate'

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    fact_hiring_process_id = Column(
        Integer, ForeignKey('fact_hiring_process.id', ondelete="CASCADE"), nullable=False, index=True
    )
    name = Column(String(255), nullable=False)
    status = Column(SAEnum(CandidateStatus), nullable=False, default=CandidateStatus.in_analysis)
    applied_at = Column(Date, nullable=True)

    fact_hiring_process = relationship("FactHiringProcess", back_populates="hiring_process_candidates")


logger.debug("Hiring metrics models configured successfully")
