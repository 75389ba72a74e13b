# tests/conftest.py

"""
Shared fixtures: company factories and small on-disk datasets.

Companies A and B are the worked example used across the metric tests:
A has twice B's participants, collection and CO2.
"""

import json

import pytest

from esg_impact.models import CompanyPerformance, CompanySummary, WasteSplit


def make_company(cid, *, esg_score=70, participants=0, plastic=0.0, toys=0.0,
                 co2_plastic=0.0, co2_toys=0.0, collection=None, co2=None, name=None):
    perf = CompanyPerformance(
        company_id=cid,
        participants=participants,
        collection_amount=plastic + toys if collection is None else collection,
        co2_reduction=co2_plastic + co2_toys if co2 is None else co2,
        waste_breakdown=WasteSplit(plastic=plastic, toys=toys),
        co2_detail=WasteSplit(plastic=co2_plastic, toys=co2_toys),
    )
    return CompanySummary(
        id=cid,
        name=name or f"Company {cid}",
        logo="🏢",
        esg_score=esg_score,
        total_participations=3,
        performance=perf,
    )


@pytest.fixture
def company_a():
    return make_company("A", esg_score=90, participants=100, plastic=600, toys=400,
                        co2_plastic=30, co2_toys=20)


@pytest.fixture
def company_b():
    return make_company("B", esg_score=70, participants=50, plastic=300, toys=200,
                        co2_plastic=15, co2_toys=10)


@pytest.fixture
def two_companies(company_a, company_b):
    return [company_a, company_b]


@pytest.fixture
def raw_dataset():
    """Minimal JSON document in the on-disk (camelCase) layout."""
    return {
        "companies": [
            {"id": "A", "name": "Alpha", "logo": "🅰️", "esgScore": 90, "totalParticipations": 4},
            {"id": "B", "name": "Beta", "logo": "🅱️", "esgScore": 70, "totalParticipations": 2},
        ],
        "performance": {
            "A": {"participants": 100, "collectionAmount": 1000, "co2Reduction": 50,
                  "wasteBreakdown": {"plastic": 600, "toys": 400},
                  "co2Detail": {"plastic": 30, "toys": 20}},
            "B": {"participants": 50, "collectionAmount": 500, "co2Reduction": 25,
                  "wasteBreakdown": {"plastic": 300, "toys": 200},
                  "co2Detail": {"plastic": 15, "toys": 10}},
        },
        "timeseries": {
            "A": [
                {"quarter": "2024 Q1", "collection": 400, "co2": 20, "participants": 40},
                {"quarter": "2024 Q2", "collection": 600, "co2": 30, "participants": 60},
            ],
            "ghost": [
                {"quarter": "2024 Q1", "collection": 1, "co2": 0.1, "participants": 1},
            ],
        },
    }


@pytest.fixture
def dataset_file(tmp_path, raw_dataset):
    path = tmp_path / "companies.json"
    path.write_text(json.dumps(raw_dataset), encoding="utf-8")
    return path
