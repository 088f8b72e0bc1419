"""
Pydantic schemas for the hiring metrics dashboard.
These schemas capture the request filter and the three derived reports
returned by the metrics endpoint.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class MetricsFilter(BaseModel):
    """
    Request filter for the metrics query.
    Dates are kept as raw strings and parsed by the query builder so a malformed
    value fails the request with a message naming the field.
    """

    model_config = ConfigDict(populate_by_name=True)

    hiring_process: Optional[str] = Field(None, alias="hiringProcess", description="Process title substring")
    vacancy: Optional[str] = Field(None, description="Vacancy title substring")
    start_date: Optional[str] = Field(None, alias="startDate", description="Closing date lower bound, YYYY-MM-DD")
    end_date: Optional[str] = Field(None, alias="endDate", description="Closing date upper bound, YYYY-MM-DD")


class VacancyStatusSummary(BaseModel):
    open: int = 0
    analyzing: int = 0
    closed: int = 0


class CardInfos(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total_processes: int = Field(0, alias="totalProcesses")
    open_processes: int = Field(0, alias="openProcesses")
    closed_processes: int = Field(0, alias="closedProcesses")
    expired_processes: int = Field(0, alias="expiredProcesses")
    approaching_deadline: int = Field(0, alias="approachingDeadline")
    total_candidates: int = Field(0, alias="totalCandidates")
    hired_candidates: int = Field(0, alias="hiredCandidates")
    average_hiring_time: float = Field(0.0, alias="averageHiringTime", description="Days")


class AverageHiringTimePerMonth(BaseModel):
    """Mean hiring time in days, bucketed by the month of the vacancy closing date."""

    january: float = 0.0
    february: float = 0.0
    march: float = 0.0
    april: float = 0.0
    may: float = 0.0
    june: float = 0.0
    july: float = 0.0
    august: float = 0.0
    september: float = 0.0
    october: float = 0.0
    november: float = 0.0
    december: float = 0.0


class MetricsData(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    vacancy_summary: VacancyStatusSummary = Field(..., alias="vacancyStatus")
    card_infos: CardInfos = Field(..., alias="cards")
    average_hiring_time: AverageHiringTimePerMonth = Field(..., alias="averageHiringTime")
