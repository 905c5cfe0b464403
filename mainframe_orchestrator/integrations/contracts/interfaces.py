from abc import ABC, abstractmethod
from typing import Any, Dict

# Raw JSON object returned by an upstream service. Its shape is dictated by the
# upstream and read through policy/response_wrappers.py.
UpstreamResult = Dict[str, Any]


# ---------------------------------------------------------------------------
# Abstract upstream interfaces
# ---------------------------------------------------------------------------

class PhonebookClient(ABC):
    """IMS phonebook (IVTNO) exposed as a REST API."""

    service_name = "phonebook"

    @abstractmethod
    async def get_contact(self, last_name: str) -> UpstreamResult:
        """Display a contact by last name."""


class PostalCodeClient(ABC):
    """Postal / zip code lookup service."""

    service_name = "postal_codes"

    @abstractmethod
    async def get_place(self, zipcode: str) -> UpstreamResult:
        """Return country and place details for a postal code."""


class CatalogClient(ABC):
    """CICS catalog manager (EGUI) exposed as REST APIs."""

    service_name = "catalog"

    # -- Orders --

    @abstractmethod
    async def place_order(self, order_request: Dict[str, Any]) -> UpstreamResult:
        """Submit a DFH0XCP1 order request."""

    # -- Items --

    @abstractmethod
    async def get_item(self, item_id: str) -> UpstreamResult:
        """Inquire a single catalog item."""


class OrderLogClient(ABC):
    """Db2 REST service recording placed orders."""

    service_name = "order_log"

    @abstractmethod
    async def log_order(self, record: Dict[str, Any]) -> UpstreamResult:
        """Insert one order row."""
