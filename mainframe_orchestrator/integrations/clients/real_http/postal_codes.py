"""
Real Postal Code HTTP Client.

See http://www.zippopotam.us for the API: GET /{country}/{postal_code}.
"""

from __future__ import annotations

from typing import Optional
from urllib.parse import quote

import httpx

from mainframe_orchestrator.integrations.clients.real_http.transport import request_json
from mainframe_orchestrator.integrations.contracts.interfaces import PostalCodeClient, UpstreamResult


class RealPostalCodeClient(PostalCodeClient):
    def __init__(
        self,
        base_url: str,
        country_code: str = "us",
        timeout_seconds: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.country_code = country_code
        self.timeout_seconds = timeout_seconds
        self.transport = transport

    async def get_place(self, zipcode: str) -> UpstreamResult:
        url = f"{self.base_url}/{self.country_code}/{quote(zipcode, safe='')}"
        return await request_json(
            "GET",
            url,
            service=self.service_name,
            step="get_place",
            timeout_seconds=self.timeout_seconds,
            transport=self.transport,
        )
