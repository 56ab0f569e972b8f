"""Goal Schemas — Pydantic models with field-level validation for goal endpoints.

Invariants:
    - Titles 1-200 chars, stripped, never blank — on create and on update
    - GoalCreate: monthly needs month, weekly needs week_start_date
    - GoalUpdate: every field optional — only set fields are written
    - A weekly payload's year is dropped: week_start_date alone decides its year
    - Years bounded to 1970-9999 so the yyyy prefix of an ISO date is always four digits

Design Decisions:
    - week_start_date parsed as date at the boundary, handed to core as an ISO string
    - Missing year on a yearly/monthly create defaults to the viewed year (ADR: the year
      selector is the implicit context of the create dialog)
"""

from datetime import date

from pydantic import BaseModel, Field, field_validator, model_validator

from life_planner.core.domain_types import GoalPeriod
from life_planner.core.records import GoalRecord, YearGoals


def _iso(value: date | None) -> str | None:
    return value.isoformat() if value else None


def _clean_title(v: str | None) -> str | None:
    if v is None:
        return v
    v = v.strip()
    if not v:
        raise ValueError("title cannot be empty or whitespace")
    return v


def _year_for(period: GoalPeriod, year: int | None) -> int | None:
    return None if period is GoalPeriod.WEEKLY else year


class GoalCreate(BaseModel):
    period: GoalPeriod
    title: str = Field(min_length=1, max_length=200)
    year: int | None = Field(None, ge=1970, le=9999)
    month: int | None = Field(None, ge=1, le=12)
    week_start_date: date | None = None
    target_date: date | None = None

    @field_validator("title")
    @classmethod
    def strip_title(cls, v):
        return _clean_title(v)

    @model_validator(mode="after")
    def check_period_fields(self) -> "GoalCreate":
        if self.period is GoalPeriod.MONTHLY and self.month is None:
            raise ValueError("monthly goals require month")
        if self.period is GoalPeriod.WEEKLY and self.week_start_date is None:
            raise ValueError("weekly goals require week_start_date")
        return self

    def to_record(self, viewed_year: int) -> GoalRecord:
        year = _year_for(self.period, self.year)
        if year is None and self.period is not GoalPeriod.WEEKLY:
            year = viewed_year
        return GoalRecord(
            period=self.period, title=self.title, year=year, month=self.month,
            week_start_date=_iso(self.week_start_date),
            target_date=_iso(self.target_date),
        )


class GoalUpdate(BaseModel):
    title: str | None = Field(None, min_length=1, max_length=200)
    year: int | None = Field(None, ge=1970, le=9999)
    month: int | None = Field(None, ge=1, le=12)
    week_start_date: date | None = None
    target_date: date | None = None

    @field_validator("title")
    @classmethod
    def strip_title(cls, v):
        return _clean_title(v)

    def to_record(self, period: GoalPeriod, goal_id: int) -> GoalRecord:
        return GoalRecord(
            period=period, id=goal_id, title=self.title,
            year=_year_for(period, self.year), month=self.month,
            week_start_date=_iso(self.week_start_date),
            target_date=_iso(self.target_date),
        )


class GoalResponse(BaseModel):
    id: int
    period: GoalPeriod
    title: str
    year: int | None
    month: int | None = None
    week_start_date: str | None = None
    target_date: str | None = None
    achieved: bool = False

    @classmethod
    def from_record(cls, record: GoalRecord) -> "GoalResponse":
        return cls(
            id=record.id, period=record.period, title=record.title,
            year=record.year, month=record.month,
            week_start_date=record.week_start_date,
            target_date=record.target_date, achieved=record.achieved,
        )


class YearGoalsResponse(BaseModel):
    year: int
    yearly: list[GoalResponse]
    monthly: list[GoalResponse]
    weekly: list[GoalResponse]

    @classmethod
    def from_shard(cls, goals: YearGoals) -> "YearGoalsResponse":
        return cls(
            year=goals.year,
            yearly=[GoalResponse.from_record(g) for g in goals.yearly],
            monthly=[GoalResponse.from_record(g) for g in goals.monthly],
            weekly=[GoalResponse.from_record(g) for g in goals.weekly],
        )


class AvailableYearsResponse(BaseModel):
    years: list[int]
