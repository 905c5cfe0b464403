"""
Mock Phonebook Client.

Purpose:
- Stands in for the IMS phonebook transaction (IVTNO)
- Does NOT make network calls
- Answers with the same OUTPUT_AREA layout z/OS Connect returns, including the
  'SPECIFIED PERSON WAS NOT FOUND' message for unknown last names
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from mainframe_orchestrator.integrations.contracts.interfaces import PhonebookClient, UpstreamResult

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Seed data
# ---------------------------------------------------------------------------

_MOCK_CONTACTS: Dict[str, Dict[str, str]] = {
    "SMITH": {"first_name": "JOHN", "extension": "8-111-2222", "zip_code": "95141"},
    "JONES": {"first_name": "MARY", "extension": "8-333-4444", "zip_code": "10001"},
    "LAST1": {"first_name": "FIRST1", "extension": "8-111-1111", "zip_code": "60601"},
}


class MockPhonebookClient(PhonebookClient):
    def __init__(self, contacts: Optional[Dict[str, Dict[str, str]]] = None) -> None:
        self.contacts = dict(_MOCK_CONTACTS if contacts is None else contacts)
        self.calls: List[Dict[str, Any]] = []

    async def get_contact(self, last_name: str) -> UpstreamResult:
        self.calls.append({"last_name": last_name})
        key = last_name.strip().upper()
        record = self.contacts.get(key)
        if record is None:
            logger.info("Mock phonebook: no entry for %s", key)
            return {
                "OUTPUT_AREA": {
                    "OUT_MESSAGE": "SPECIFIED PERSON WAS NOT FOUND",
                    "OUT_LAST_NAME": key,
                    "OUT_FIRST_NAME": "",
                    "OUT_EXTENSION": "",
                    "OUT_ZIP_CODE": "",
                }
            }

        return {
            "OUTPUT_AREA": {
                "OUT_MESSAGE": "ENTRY WAS DISPLAYED",
                "OUT_LAST_NAME": key,
                "OUT_FIRST_NAME": record["first_name"],
                "OUT_EXTENSION": record["extension"],
                "OUT_ZIP_CODE": record["zip_code"],
            }
        }
