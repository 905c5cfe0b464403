"""
Real Order Log HTTP Client.

Inserts placed orders into the Db2 order table through the Db2 REST service
(POST /db2/catalog/order). Its answer is not read beyond the HTTP status.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import httpx

from mainframe_orchestrator.integrations.clients.real_http.transport import request_json
from mainframe_orchestrator.integrations.contracts.interfaces import OrderLogClient, UpstreamResult


class RealOrderLogClient(OrderLogClient):
    def __init__(
        self,
        base_url: str,
        timeout_seconds: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self.transport = transport

    async def log_order(self, record: Dict[str, Any]) -> UpstreamResult:
        return await request_json(
            "POST",
            f"{self.base_url}/db2/catalog/order",
            service=self.service_name,
            step="log_order",
            timeout_seconds=self.timeout_seconds,
            transport=self.transport,
            json=record,
            headers={"Content-Type": "application/json"},
        )
