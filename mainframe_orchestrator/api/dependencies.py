"""
Dependency providers for the orchestration endpoints.

Mock vs real upstream clients are selected here and nowhere else.
"""

import logging
from functools import lru_cache

from fastapi import Depends

from mainframe_orchestrator.integrations.clients.mocks import (
    MockCatalogClient,
    MockOrderLogClient,
    MockPhonebookClient,
    MockPostalCodeClient,
)
from mainframe_orchestrator.integrations.clients.real_http import (
    RealCatalogClient,
    RealOrderLogClient,
    RealPhonebookClient,
    RealPostalCodeClient,
)
from mainframe_orchestrator.orchestration import ClaimRuleEvaluator, ContactOrchestrator, OrderOrchestrator
from mainframe_orchestrator.utils.config_loader import OrchestratorConfig, load_orchestrator_config

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_config() -> OrchestratorConfig:
    return load_orchestrator_config()


def use_mock_integrations(config: OrchestratorConfig) -> bool:
    return config.integrations_mode == "mock"


def get_contact_orchestrator(config: OrchestratorConfig = Depends(get_config)) -> ContactOrchestrator:
    if use_mock_integrations(config):
        return ContactOrchestrator(
            MockPhonebookClient(),
            MockPostalCodeClient(),
            not_found_message=config.contact_lookup.not_found_message,
        )

    upstreams = config.upstreams
    return ContactOrchestrator(
        RealPhonebookClient(
            base_url=upstreams.phonebook.base_url,
            timeout_seconds=upstreams.phonebook.timeout_seconds,
        ),
        RealPostalCodeClient(
            base_url=upstreams.postal_codes.base_url,
            country_code=config.contact_lookup.country_code,
            timeout_seconds=upstreams.postal_codes.timeout_seconds,
        ),
        not_found_message=config.contact_lookup.not_found_message,
    )


def get_order_orchestrator(config: OrchestratorConfig = Depends(get_config)) -> OrderOrchestrator:
    upstreams = config.upstreams
    log_enabled = upstreams.order_log.enabled

    if use_mock_integrations(config):
        return OrderOrchestrator(
            MockCatalogClient(),
            MockOrderLogClient() if log_enabled else None,
            success_message=config.mobile_order.success_message,
        )

    order_log = None
    if log_enabled:
        order_log = RealOrderLogClient(
            base_url=upstreams.order_log.base_url,
            timeout_seconds=upstreams.order_log.timeout_seconds,
        )
    return OrderOrchestrator(
        RealCatalogClient(
            base_url=upstreams.catalog.base_url,
            timeout_seconds=upstreams.catalog.timeout_seconds,
        ),
        order_log,
        success_message=config.mobile_order.success_message,
    )


def get_claim_evaluator(config: OrchestratorConfig = Depends(get_config)) -> ClaimRuleEvaluator:
    return ClaimRuleEvaluator(config.claim_rules.limits)
