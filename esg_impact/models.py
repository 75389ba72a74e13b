# esg_impact/models.py
from __future__ import annotations
from typing import NamedTuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _Record(BaseModel):
    # Dataset keys are camelCase; Python code uses the snake_case names.
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )


class WasteSplit(_Record):
    plastic: float = Field(0.0, ge=0)
    toys: float = Field(0.0, ge=0)


class CompanyPerformance(_Record):
    company_id: str
    participants: int = Field(..., ge=0)
    collection_amount: float = Field(..., ge=0)     # kg
    co2_reduction: float = Field(..., ge=0)         # tonnes
    waste_breakdown: WasteSplit                     # kg
    co2_detail: WasteSplit                          # tonnes


class CompanySummary(_Record):
    id: str
    name: str
    logo: str = ""
    esg_score: int = Field(..., ge=0, le=100)
    total_participations: int = Field(0, ge=0)
    performance: CompanyPerformance


class TimeSeriesPoint(_Record):
    quarter: str
    collection: float
    co2: float
    participants: int


class Totals(NamedTuple):
    participants: int
    collection: float
    co2: float
    plastic_total: float
    toys_total: float
    plastic_co2: float
    toys_co2: float


class ESGGrade(NamedTuple):
    grade: str
    color: str
    description: str


class Equivalences(NamedTuple):
    trees: int
    car_years: float
    ice_area_m2: int
