"""
Shared test fixtures.

The API tests point the app at a fixture chart file so they
never depend on whatever CHART_PATH is configured locally.
"""

import copy
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from cratchit.main import app
from cratchit.services.chart_source import ChartSource, get_chart_source


FIXTURES_DIR = Path(__file__).parent / "fixtures"
CHART_FIXTURE = FIXTURES_DIR / "ChartOfAccounts.json"

# Two-level chart with a parent missing description and currency
SCENARIO_DOCUMENT = {
    "accounts": [
        {
            "id": "01",
            "name": "Accounts Receivable",
            "type": "Asset",
            "placeholder": True,
            "subaccounts": [
                {
                    "id": "01-01",
                    "name": "Lakeville North High School",
                    "description": "A/R for Lakeville North High School Hockey",
                    "currency": "USD",
                    "type": "Asset",
                    "placeholder": False,
                },
            ],
        },
    ],
}


@pytest.fixture
def scenario_document():
    """A fresh copy so tests can mutate it freely."""
    return copy.deepcopy(SCENARIO_DOCUMENT)


@pytest.fixture
def fixture_source():
    return ChartSource(CHART_FIXTURE)


@pytest.fixture
def fixture_document(fixture_source):
    return fixture_source.read_document()


@pytest.fixture
def client(fixture_source):
    """
    Provide a test client backed by the fixture chart.

    We override the get_chart_source dependency so the app
    reads tests/fixtures/ChartOfAccounts.json.
    """
    app.dependency_overrides[get_chart_source] = lambda: fixture_source
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def broken_client(tmp_path):
    """A test client whose chart file does not exist."""
    source = ChartSource(tmp_path / "missing.json")
    app.dependency_overrides[get_chart_source] = lambda: source
    yield TestClient(app)
    app.dependency_overrides.clear()
