"""Pytest fixtures for orchestration flow and API tests."""

import pytest
from fastapi.testclient import TestClient

from mainframe_orchestrator.api import dependencies
from mainframe_orchestrator.api.main import app
from mainframe_orchestrator.integrations.clients.mocks import (
    MockCatalogClient,
    MockOrderLogClient,
    MockPhonebookClient,
    MockPostalCodeClient,
)
from mainframe_orchestrator.orchestration import ClaimRuleEvaluator, ContactOrchestrator, OrderOrchestrator


@pytest.fixture
def phonebook():
    return MockPhonebookClient()


@pytest.fixture
def postal_codes():
    return MockPostalCodeClient()


@pytest.fixture
def catalog():
    return MockCatalogClient()


@pytest.fixture
def order_log():
    return MockOrderLogClient()


@pytest.fixture
def contact_orchestrator(phonebook, postal_codes):
    return ContactOrchestrator(phonebook, postal_codes)


@pytest.fixture
def order_orchestrator(catalog, order_log):
    return OrderOrchestrator(catalog, order_log)


@pytest.fixture
def api_client(contact_orchestrator, order_orchestrator):
    """TestClient wired to the mock-backed orchestrators of this test."""
    app.dependency_overrides[dependencies.get_contact_orchestrator] = lambda: contact_orchestrator
    app.dependency_overrides[dependencies.get_order_orchestrator] = lambda: order_orchestrator
    app.dependency_overrides[dependencies.get_claim_evaluator] = lambda: ClaimRuleEvaluator()
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()
