"""
Mock Order Log Client.

Keeps inserted Db2 order rows in memory instead of calling the Db2 REST service.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, List

from mainframe_orchestrator.integrations.contracts.interfaces import OrderLogClient, UpstreamResult


class MockOrderLogClient(OrderLogClient):
    def __init__(self) -> None:
        self.records: List[Dict[str, Any]] = []
        self.calls: List[Dict[str, Any]] = []

    async def log_order(self, record: Dict[str, Any]) -> UpstreamResult:
        self.calls.append({"record": record})
        row = dict(record, order_ts=datetime.now(timezone.utc).isoformat())
        self.records.append(row)
        return {"StatusCode": 200, "StatusDescription": "Execution Successful", "Update Count": 1}
