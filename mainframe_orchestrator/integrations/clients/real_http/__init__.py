"""
Real HTTP integration clients.

These clients communicate with the real upstream systems via HTTP:
- IMS phonebook (z/OS Connect)
- postal code lookup (zippopotam.us)
- CICS catalog manager (z/OS Connect)
- Db2 order log REST service (z/OS Connect)

Important:
- Must implement the same interfaces as the mock clients
- Return the raw upstream JSON; reading it is done by policy/response_wrappers.py

Switching:
The selection of mock vs real clients happens in api/dependencies.py only.
"""

from .catalog import RealCatalogClient
from .order_log import RealOrderLogClient
from .phonebook import RealPhonebookClient
from .postal_codes import RealPostalCodeClient

__all__ = [
    "RealCatalogClient",
    "RealOrderLogClient",
    "RealPhonebookClient",
    "RealPostalCodeClient",
]
