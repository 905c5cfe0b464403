"""
Real Phonebook HTTP Client.

Calls the IMS phonebook 'display a contact' transaction, exposed as
GET /phonebook/contact/{last_name} by z/OS Connect behind the secure gateway.
"""

from __future__ import annotations

from typing import Optional
from urllib.parse import quote

import httpx

from mainframe_orchestrator.integrations.clients.real_http.transport import request_json
from mainframe_orchestrator.integrations.contracts.interfaces import PhonebookClient, UpstreamResult


class RealPhonebookClient(PhonebookClient):
    def __init__(
        self,
        base_url: str,
        timeout_seconds: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self.transport = transport

    async def get_contact(self, last_name: str) -> UpstreamResult:
        url = f"{self.base_url}/phonebook/contact/{quote(last_name, safe='')}"
        return await request_json(
            "GET",
            url,
            service=self.service_name,
            step="get_contact",
            timeout_seconds=self.timeout_seconds,
            transport=self.transport,
        )
