"""
Mock Postal Code Client.

Returns zippopotam.us-shaped answers for a handful of US zip codes. Unknown
codes fail with a 404, as the real service does.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from mainframe_orchestrator.error_handler import UpstreamUnavailable
from mainframe_orchestrator.integrations.contracts.interfaces import PostalCodeClient, UpstreamResult


# ---------------------------------------------------------------------------
# Seed data
# ---------------------------------------------------------------------------

_MOCK_PLACES: Dict[str, Dict[str, str]] = {
    "95141": {"place name": "San Jose", "state": "California", "latitude": "37.1835", "longitude": "-121.7714"},
    "10001": {"place name": "New York City", "state": "New York", "latitude": "40.7484", "longitude": "-73.9967"},
    "60601": {"place name": "Chicago", "state": "Illinois", "latitude": "41.8858", "longitude": "-87.6181"},
}


class MockPostalCodeClient(PostalCodeClient):
    def __init__(self, places: Optional[Dict[str, Dict[str, str]]] = None) -> None:
        self.places = dict(_MOCK_PLACES if places is None else places)
        self.calls: List[Dict[str, Any]] = []

    async def get_place(self, zipcode: str) -> UpstreamResult:
        self.calls.append({"zipcode": zipcode})
        place = self.places.get(zipcode)
        if place is None:
            raise UpstreamUnavailable(
                f"Unknown postal code {zipcode}",
                service=self.service_name,
                step="get_place",
                status_code=404,
                detail="{}",
            )
        return {
            "post code": zipcode,
            "country": "United States",
            "country abbreviation": "US",
            "places": [dict(place, **{"state abbreviation": ""})],
        }
