"""
Real Catalog HTTP Client.

Purpose:
- Places orders through the CICS catalog manager 'order an item' function
- Inquires single items ('get details of a specific item')

Both functions are exposed as REST APIs by z/OS Connect:
- POST /product/catalog/order/mobile   (DFH0XCP1 commarea JSON)
- GET  /product/catalog/mobile?itemID=
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import httpx

from mainframe_orchestrator.integrations.clients.real_http.transport import request_json
from mainframe_orchestrator.integrations.contracts.interfaces import CatalogClient, UpstreamResult


class RealCatalogClient(CatalogClient):
    def __init__(
        self,
        base_url: str,
        timeout_seconds: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self.transport = transport

    async def place_order(self, order_request: Dict[str, Any]) -> UpstreamResult:
        return await request_json(
            "POST",
            f"{self.base_url}/product/catalog/order/mobile",
            service=self.service_name,
            step="place_order",
            timeout_seconds=self.timeout_seconds,
            transport=self.transport,
            json=order_request,
            headers={"Content-Type": "application/json"},
        )

    async def get_item(self, item_id: str) -> UpstreamResult:
        return await request_json(
            "GET",
            f"{self.base_url}/product/catalog/mobile",
            service=self.service_name,
            step="get_item",
            timeout_seconds=self.timeout_seconds,
            transport=self.transport,
            params={"itemID": item_id},
        )
