"""
Integrations layer.
This package contains all code used to communicate with upstream systems:
- IMS phonebook (contact lookup)
- postal code API (address enrichment)
- CICS catalog manager (order placement, item inquiry)
- Db2 REST service (order log)

Key rule:
- Orchestration flows MUST NOT call external APIs directly.
- Flows call integration clients (under integrations/clients).
- We use MOCK clients during development and swap to REAL_HTTP clients when the gateway is reachable.

Switching implementations:
- The selection of mock vs real clients happens in ONE place (api/dependencies.py).
"""

from .contracts.claims import ClaimRequest, ClaimRule
from .contracts.interfaces import (
    CatalogClient,
    OrderLogClient,
    PhonebookClient,
    PostalCodeClient,
    UpstreamResult,
)
from .contracts.orders import OrderRequest, build_cics_order_request, build_order_log_record

__all__ = [
    # interfaces
    "CatalogClient", "OrderLogClient", "PhonebookClient", "PostalCodeClient", "UpstreamResult",
    # orders
    "OrderRequest", "build_cics_order_request", "build_order_log_record",
    # claims
    "ClaimRequest", "ClaimRule",
]
