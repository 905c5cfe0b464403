"""
Mock integration clients.

These clients return fake (but realistic) mainframe-shaped responses without
calling any external API. They are used when:
- the secure gateway / z/OS Connect endpoints are not reachable
- we want to exercise the orchestrations end-to-end without external dependencies

Important:
- Mock clients must follow the SAME interface as real HTTP clients.
- Every call is recorded on ``calls`` so tests can assert which steps ran.

Switching to real:
Set INTEGRATIONS_MODE=real (or integrations_mode: real in config/orchestrator.yml);
api/dependencies.py then wires clients/real_http/* instead.
"""

from .catalog import MockCatalogClient
from .order_log import MockOrderLogClient
from .phonebook import MockPhonebookClient
from .postal_codes import MockPostalCodeClient

__all__ = [
    "MockCatalogClient",
    "MockOrderLogClient",
    "MockPhonebookClient",
    "MockPostalCodeClient",
]
