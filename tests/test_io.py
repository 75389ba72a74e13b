# tests/test_io.py
import copy
import json
import logging

import pytest
from pydantic import ValidationError

from esg_impact import io as store
from esg_impact.config import SETTINGS
from esg_impact.errors import DatasetError
from esg_impact.metrics import check_consistency, compute_totals, timeseries_by_company


@pytest.fixture
def point_settings_at(monkeypatch):
    """Point the cached loader at a different dataset file for one test."""
    def _point(path):
        monkeypatch.setattr(SETTINGS, "data_dir", path.parent)
        monkeypatch.setattr(SETTINGS, "dataset_file", path.name)
        store.load_dataset.cache_clear()
    yield _point
    store.load_dataset.cache_clear()


# =============================================================================
# PARSING
# =============================================================================

def test_read_dataset_joins_performance(dataset_file):
    ds = store.read_dataset(dataset_file)
    assert [c.id for c in ds.companies] == ["A", "B"]
    a = ds.companies[0]
    assert a.esg_score == 90
    assert a.performance.company_id == "A"
    assert a.performance.collection_amount == 1000
    assert a.performance.waste_breakdown.plastic == 600
    assert ds.performance["B"].co2_detail.toys == 10


def test_read_dataset_totals_match_worked_example(dataset_file):
    totals = compute_totals(store.read_dataset(dataset_file).companies)
    assert (totals.participants, totals.collection, totals.co2) == (150, 1500, 75)


def test_timeseries_keeps_order(dataset_file):
    ds = store.read_dataset(dataset_file)
    assert [p.quarter for p in ds.timeseries["A"]] == ["2024 Q1", "2024 Q2"]


def test_unmatched_timeseries_is_skipped(dataset_file, caplog):
    ds = store.read_dataset(dataset_file)
    with caplog.at_level(logging.DEBUG, logger="esg_impact.metrics"):
        pairs = list(timeseries_by_company(ds.companies, ds.timeseries))
    assert [c.id for c, _ in pairs] == ["A"]
    assert "ghost" in caplog.text


def test_records_are_frozen(dataset_file):
    company = store.read_dataset(dataset_file).companies[0]
    with pytest.raises(ValidationError):
        company.esg_score = 10


def test_store_mappings_are_read_only(dataset_file):
    ds = store.read_dataset(dataset_file)
    with pytest.raises(TypeError):
        ds.performance["C"] = ds.performance["A"]


# =============================================================================
# ERRORS
# =============================================================================

def test_missing_file(tmp_path):
    with pytest.raises(DatasetError, match="not found"):
        store.read_dataset(tmp_path / "nope.json")


def test_malformed_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(DatasetError, match="not valid JSON"):
        store.read_dataset(path)


def test_duplicate_id(raw_dataset):
    raw = copy.deepcopy(raw_dataset)
    raw["companies"].append(dict(raw["companies"][0]))
    with pytest.raises(DatasetError, match="duplicate"):
        store.parse_dataset(raw)


def test_company_without_performance(raw_dataset):
    raw = copy.deepcopy(raw_dataset)
    del raw["performance"]["B"]
    with pytest.raises(DatasetError, match="no performance"):
        store.parse_dataset(raw)


def test_score_out_of_range(raw_dataset):
    raw = copy.deepcopy(raw_dataset)
    raw["companies"][0]["esgScore"] = 120
    with pytest.raises(DatasetError, match="invalid company record"):
        store.parse_dataset(raw)


def test_negative_collection(raw_dataset):
    raw = copy.deepcopy(raw_dataset)
    raw["performance"]["A"]["collectionAmount"] = -1
    with pytest.raises(DatasetError):
        store.parse_dataset(raw)


def test_root_must_be_object():
    with pytest.raises(DatasetError):
        store.parse_dataset([1, 2, 3])


# =============================================================================
# CACHED ACCESSORS
# =============================================================================

def test_accessors_read_configured_file(dataset_file, point_settings_at):
    point_settings_at(dataset_file)
    summaries = store.get_all_company_summaries()
    assert [c.name for c in summaries] == ["Alpha", "Beta"]
    assert set(store.get_companies_performance()) == {"A", "B"}
    assert set(store.get_companies_timeseries()) == {"A", "ghost"}


def test_accessor_returns_fresh_list(dataset_file, point_settings_at):
    point_settings_at(dataset_file)
    first = store.get_all_company_summaries()
    first.clear()
    assert len(store.get_all_company_summaries()) == 2


def test_load_warns_on_inconsistent_record(tmp_path, raw_dataset, point_settings_at, caplog):
    raw = copy.deepcopy(raw_dataset)
    raw["performance"]["A"]["collectionAmount"] = 1200
    path = tmp_path / "inconsistent.json"
    path.write_text(json.dumps(raw), encoding="utf-8")
    point_settings_at(path)
    with caplog.at_level(logging.WARNING, logger="esg_impact.io"):
        store.load_dataset()
    assert "A: waste breakdown sums to 1000 kg" in caplog.text


def test_bundled_dataset_is_consistent():
    ds = store.read_dataset(SETTINGS.dataset_path)
    assert ds.companies
    assert check_consistency(ds.companies) == []
