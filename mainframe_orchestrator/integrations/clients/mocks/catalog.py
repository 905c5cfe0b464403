"""
Mock Catalog Client.

Purpose:
- Provides a fake CICS catalog manager (EGUI) for development/testing
- Does NOT make network calls
- Keeps stock per item so consecutive orders deplete it

Behavior guidelines:
- place_order(...) answers 'ORDER SUCCESSFULLY PLACED' while stock lasts,
  otherwise one of the catalog manager's failure messages
- get_item(...) answers the CA_INQUIRE_SINGLE layout, cost as a zero-padded string
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from mainframe_orchestrator.integrations.contracts.interfaces import CatalogClient, UpstreamResult

logger = logging.getLogger(__name__)

ORDER_PLACED = "ORDER SUCCESSFULLY PLACED"
INSUFFICIENT_STOCK = "INSUFFICIENT STOCK TO COMPLETE ORDER"
UNKNOWN_ITEM = "UNKNOWN ITEM REFERENCE"


# ---------------------------------------------------------------------------
# Seed data
# ---------------------------------------------------------------------------

_MOCK_ITEMS: Dict[str, Dict[str, Any]] = {
    "0010": {"description": "Apple iPhone X 64GB", "department": "010", "cost": "799.00", "stock": 120},
    "0020": {"description": "Samsung Galaxy S9 64GB", "department": "010", "cost": "719.99", "stock": 85},
    "0030": {"description": "Google Pixel 2 XL", "department": "010", "cost": "649.50", "stock": 40},
    "0040": {"description": "Motorola Moto G6", "department": "020", "cost": "249.95", "stock": 10},
    "0050": {"description": "Nokia 6.1", "department": "020", "cost": "002.90", "stock": 0},
}


class MockCatalogClient(CatalogClient):
    def __init__(self, items: Optional[Dict[str, Dict[str, Any]]] = None) -> None:
        source = _MOCK_ITEMS if items is None else items
        self.items = {key: dict(value) for key, value in source.items()}
        self.calls: List[Dict[str, Any]] = []

    async def place_order(self, order_request: Dict[str, Any]) -> UpstreamResult:
        self.calls.append({"step": "place_order", "body": order_request})
        request = order_request.get("DFH0XCP1", {}).get("CA_ORDER_REQUEST", {})
        item_ref = str(request.get("CA_ITEM_REF_NUMBER", ""))
        qty = int(request.get("CA_QUANTITY_REQ") or 0)

        item = self.items.get(item_ref)
        if item is None:
            message = UNKNOWN_ITEM
        elif qty > item["stock"]:
            message = INSUFFICIENT_STOCK
        else:
            item["stock"] -= qty
            message = ORDER_PLACED
        logger.info("Mock catalog order item=%s qty=%s -> %s", item_ref, qty, message)

        return {
            "DFH0XCP1": {
                "CA_REQUEST_ID": "01ORDR",
                "CA_RETURN_CODE": 0 if message == ORDER_PLACED else 97,
                "CA_RESPONSE_MESSAGE": message,
                "CA_ORDER_REQUEST": dict(request),
            }
        }

    async def get_item(self, item_id: str) -> UpstreamResult:
        self.calls.append({"step": "get_item", "item_id": item_id})
        item = self.items.get(item_id)
        single = {
            "CA_SNGL_ITEM_REF": item_id,
            "CA_SNGL_DESCRIPTION": item["description"] if item else "",
            "CA_SNGL_DEPARTMENT": item["department"] if item else "",
            "CA_SNGL_COST": item["cost"] if item else "000.00",
            "IN_SNGL_STOCK": item["stock"] if item else 0,
            "ON_SNGL_ORDER": 0,
        }
        return {
            "DFH0XCP1": {
                "CA_REQUEST_ID": "01INQS",
                "CA_RETURN_CODE": 0 if item else 20,
                "CA_RESPONSE_MESSAGE": "RETURNED ITEM: REF=" + item_id,
                "CA_INQUIRE_SINGLE": {"CA_ITEM_REF_REQ": item_id, "CA_SINGLE_ITEM": single},
            }
        }
