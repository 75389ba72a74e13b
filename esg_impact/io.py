# esg_impact/io.py
from __future__ import annotations
import json
import logging
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, NamedTuple, Tuple

from pydantic import ValidationError

from .config import SETTINGS
from .errors import DatasetError
from .metrics import check_consistency
from .models import CompanyPerformance, CompanySummary, TimeSeriesPoint

logger = logging.getLogger(__name__)


class Dataset(NamedTuple):
    companies: Tuple[CompanySummary, ...]
    performance: Mapping[str, CompanyPerformance]
    timeseries: Mapping[str, Tuple[TimeSeriesPoint, ...]]


def parse_dataset(raw: Dict[str, Any]) -> Dataset:
    """Validate the raw JSON document and join each company with its performance."""
    if not isinstance(raw, dict):
        raise DatasetError("dataset root must be a JSON object")

    try:
        performance = {
            cid: CompanyPerformance.model_validate({**rec, "companyId": cid})
            for cid, rec in (raw.get("performance") or {}).items()
        }
        timeseries = {
            cid: tuple(TimeSeriesPoint.model_validate(pt) for pt in (points or []))
            for cid, points in (raw.get("timeseries") or {}).items()
        }
    except (ValidationError, TypeError) as e:
        raise DatasetError(f"invalid performance/timeseries record: {e}") from e

    companies: List[CompanySummary] = []
    seen = set()
    for rec in raw.get("companies") or []:
        cid = rec.get("id") if isinstance(rec, dict) else None
        if cid is None:
            raise DatasetError(f"company record without id: {rec!r}")
        if cid in seen:
            raise DatasetError(f"duplicate company id {cid!r}")
        seen.add(cid)
        if cid not in performance:
            raise DatasetError(f"company {cid!r} has no performance record")
        try:
            companies.append(CompanySummary.model_validate({**rec, "performance": performance[cid]}))
        except ValidationError as e:
            raise DatasetError(f"invalid company record {cid!r}: {e}") from e

    return Dataset(
        companies=tuple(companies),
        performance=MappingProxyType(performance),
        timeseries=MappingProxyType(timeseries),
    )


def read_dataset(path: Path) -> Dataset:
    path = Path(path)
    if not path.exists():
        raise DatasetError(f"dataset not found: {path}")
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise DatasetError(f"{path} is not valid JSON: {e}") from e
    return parse_dataset(raw)


@lru_cache(maxsize=1)
def load_dataset() -> Dataset:
    path = SETTINGS.dataset_path
    ds = read_dataset(path)
    logger.info("loaded %d companies (%d time series) from %s", len(ds.companies), len(ds.timeseries), path)
    for msg in check_consistency(ds.companies, SETTINGS.consistency_tolerance):
        logger.warning("dataset inconsistency: %s", msg)
    return ds


def get_all_company_summaries() -> List[CompanySummary]:
    return list(load_dataset().companies)


def get_companies_performance() -> Mapping[str, CompanyPerformance]:
    return load_dataset().performance


def get_companies_timeseries() -> Mapping[str, Tuple[TimeSeriesPoint, ...]]:
    return load_dataset().timeseries
