# esg_impact/metrics.py
"""
Aggregation, grading and ranking over the company metrics.

Everything here is a pure function of its arguments: nothing is cached and
inputs are never mutated, so the dashboard can recompute on every rerun.
"""
from __future__ import annotations
import logging
import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, Iterator, List, Mapping, Sequence, Tuple

import pandas as pd

from .errors import InsufficientDataError
from .models import (
    CompanySummary,
    ESGGrade,
    Equivalences,
    TimeSeriesPoint,
    Totals,
)

logger = logging.getLogger(__name__)

# Conversion factors for the "environmental impact" cards
KG_CO2_PER_TREE_YEAR = 22
TONNES_CO2_PER_CAR_YEAR = 4.6
ICE_M2_PER_KG_CO2 = 0.00744

# sort key -> (performance attribute, display label)
SORT_OPTIONS: Dict[str, Tuple[str, str]] = {
    "co2": ("co2_reduction", "CO₂ reduction"),
    "collection": ("collection_amount", "Total collection"),
    "participants": ("participants", "Participants"),
}

# Lower bound (inclusive) -> grade
_GRADES: List[Tuple[int, ESGGrade]] = [
    (80, ESGGrade("S (Superior)", "#10B981", "Outstanding, industry-leading")),
    (60, ESGGrade("A (Advanced)", "#3B82F6", "Excellent, leading activity")),
    (40, ESGGrade("B (Basic)", "#F59E0B", "Good, baseline targets met")),
]
_CAUTION = ESGGrade("C (Caution)", "#EF4444", "Caution, needs improvement")

_MEDALS = ("🥇", "🥈", "🥉")


# ---------- rounding ----------
def round_half_up(x: float, digits: int = 0) -> float:
    """
    Round ties up instead of to even, as Python's round() does.

    digits=0 matches JavaScript's Math.round (ties towards +inf).
    digits>0 matches Number.toFixed: the exact binary value is rounded,
    so 0.15 (stored as 0.1499...) goes to 0.1.
    """
    if digits == 0:
        whole = math.floor(x)
        return float(whole + 1 if x - whole >= 0.5 else whole)
    step = Decimal(1).scaleb(-digits)
    return float(Decimal(x).quantize(step, rounding=ROUND_HALF_UP))


def _round_int(x: float) -> int:
    return int(round_half_up(x))


# ---------- aggregation ----------
def compute_totals(companies: Sequence[CompanySummary]) -> Totals:
    participants = 0
    collection = co2 = 0.0
    plastic_total = toys_total = plastic_co2 = toys_co2 = 0.0
    for c in companies:
        p = c.performance
        participants += p.participants
        collection += p.collection_amount
        co2 += p.co2_reduction
        plastic_total += p.waste_breakdown.plastic
        toys_total += p.waste_breakdown.toys
        plastic_co2 += p.co2_detail.plastic
        toys_co2 += p.co2_detail.toys
    return Totals(
        participants=participants,
        collection=collection,
        co2=co2,
        plastic_total=plastic_total,
        toys_total=toys_total,
        plastic_co2=plastic_co2,
        toys_co2=toys_co2,
    )


def compute_average_score(companies: Sequence[CompanySummary]) -> int:
    if not companies:
        raise InsufficientDataError("cannot average ESG scores of zero companies")
    return _round_int(sum(c.esg_score for c in companies) / len(companies))


def grade_for(score: int) -> ESGGrade:
    for lower, grade in _GRADES:
        if score >= lower:
            return grade
    return _CAUTION


def score_badge(esg_score: int) -> str:
    """Badge style for a single company's score in the ranking table."""
    if esg_score >= 85:
        return "success"
    if esg_score >= 75:
        return "info"
    return "warning"


# ---------- ratios ----------
def share_pct(part: float, total: float) -> int | None:
    """Whole-number percentage of part in total; None when total is zero."""
    if not total:
        return None
    return _round_int(part / total * 100)


def equivalences(total_co2_tonnes: float) -> Equivalences:
    co2_kg = total_co2_tonnes * 1000
    return Equivalences(
        trees=_round_int(co2_kg / KG_CO2_PER_TREE_YEAR),
        car_years=round_half_up(total_co2_tonnes / TONNES_CO2_PER_CAR_YEAR, 1),
        ice_area_m2=_round_int(co2_kg * ICE_M2_PER_KG_CO2),
    )


# ---------- ranking ----------
def rank_companies(companies: Sequence[CompanySummary], sort_key: str) -> List[CompanySummary]:
    """
    New list sorted descending by the metric behind sort_key.
    Equal values fall back to ascending company id so row order is stable.
    """
    if sort_key not in SORT_OPTIONS:
        raise ValueError(f"unknown sort key {sort_key!r}; expected one of {sorted(SORT_OPTIONS)}")
    attr = SORT_OPTIONS[sort_key][0]
    return sorted(companies, key=lambda c: (-getattr(c.performance, attr), c.id))


def rank_label(position: int) -> str:
    """Medal for the top three (0-based position), 1-based number after that."""
    if 0 <= position < len(_MEDALS):
        return _MEDALS[position]
    return str(position + 1)


# ---------- consistency ----------
def check_consistency(companies: Sequence[CompanySummary], tolerance: float = 0.01) -> List[str]:
    """One message per company whose category split does not add up to its total."""
    problems = []
    for c in companies:
        p = c.performance
        kg = p.waste_breakdown.plastic + p.waste_breakdown.toys
        if abs(kg - p.collection_amount) > tolerance:
            problems.append(
                f"{c.id}: waste breakdown sums to {kg:g} kg but collection is {p.collection_amount:g} kg"
            )
        t = p.co2_detail.plastic + p.co2_detail.toys
        if abs(t - p.co2_reduction) > tolerance:
            problems.append(
                f"{c.id}: CO2 detail sums to {t:g} t but reduction is {p.co2_reduction:g} t"
            )
    return problems


# ---------- frames for charts and tables ----------
def waste_type_frame(totals: Totals) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {"type": "Plastic", "collection_kg": totals.plastic_total, "co2_tonnes": round(totals.plastic_co2, 2)},
            {"type": "Toys", "collection_kg": totals.toys_total, "co2_tonnes": round(totals.toys_co2, 2)},
        ]
    )


def comparison_frame(ranked: Sequence[CompanySummary]) -> pd.DataFrame:
    rows = [
        {
            "company": c.name,
            "plastic": c.performance.waste_breakdown.plastic,
            "toys": c.performance.waste_breakdown.toys,
            "co2": c.performance.co2_reduction,
        }
        for c in ranked
    ]
    return pd.DataFrame(rows, columns=["company", "plastic", "toys", "co2"])


def ranking_table(ranked: Sequence[CompanySummary]) -> pd.DataFrame:
    cols = [
        "rank", "id", "company", "plastic_kg", "toys_kg", "collection_kg",
        "co2_tonnes", "participants", "esg_score", "badge",
    ]
    rows = []
    for i, c in enumerate(ranked):
        p = c.performance
        rows.append({
            "rank": rank_label(i),
            "id": c.id,
            "company": f"{c.logo} {c.name}".strip(),
            "plastic_kg": p.waste_breakdown.plastic,
            "toys_kg": p.waste_breakdown.toys,
            "collection_kg": p.collection_amount,
            "co2_tonnes": p.co2_reduction,
            "participants": p.participants,
            "esg_score": c.esg_score,
            "badge": score_badge(c.esg_score),
        })
    return pd.DataFrame(rows, columns=cols)


def timeseries_frame(points: Sequence[TimeSeriesPoint]) -> pd.DataFrame:
    return pd.DataFrame(
        [pt.model_dump() for pt in points],
        columns=["quarter", "collection", "co2", "participants"],
    )


def timeseries_by_company(
    companies: Sequence[CompanySummary],
    timeseries: Mapping[str, Sequence[TimeSeriesPoint]],
) -> Iterator[Tuple[CompanySummary, Sequence[TimeSeriesPoint]]]:
    """Pair each series with its company, in series order; unknown ids are skipped."""
    by_id = {c.id: c for c in companies}
    for cid, points in timeseries.items():
        company = by_id.get(cid)
        if company is None:
            logger.debug("no company for time series %r; skipping", cid)
            continue
        yield company, points
