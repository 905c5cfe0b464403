"""
Contact lookup flow - phonebook contact enriched with postal code details
"""

import logging
from typing import Any, Dict

from mainframe_orchestrator.integrations.contracts.interfaces import PhonebookClient, PostalCodeClient
from mainframe_orchestrator.integrations.policy.response_wrappers import (
    normalize_phonebook_response,
    normalize_postal_code_response,
)

logger = logging.getLogger(__name__)

CONTACT_FOUND = "Contact record found"
CONTACT_NOT_FOUND = "Contact record not found"


class ContactOrchestrator:
    def __init__(
        self,
        phonebook: PhonebookClient,
        postal_codes: PostalCodeClient,
        not_found_message: str = "SPECIFIED PERSON WAS NOT FOUND",
    ):
        self.phonebook = phonebook
        self.postal_codes = postal_codes
        self.not_found_message = not_found_message

    async def get_contact(self, last_name: str) -> Dict[str, Any]:
        """Look up a contact by last name and add the address details for its zip code.

        An unknown last name short-circuits with only a status field; the postal
        code service is not called in that case.
        """
        contact: Dict[str, Any] = {}
        logger.info("[ContactLookup] start last_name=%s", last_name)

        entry = normalize_phonebook_response(await self.phonebook.get_contact(last_name))
        if entry.message == self.not_found_message:
            logger.info("[ContactLookup] no phonebook entry for %s", last_name)
            contact["status"] = CONTACT_NOT_FOUND
            return contact

        contact["lastname"] = entry.last_name
        contact["firstname"] = entry.first_name
        contact["extension"] = entry.extension
        contact["zipcode"] = entry.zip_code

        place = normalize_postal_code_response(await self.postal_codes.get_place(entry.zip_code))
        contact["country"] = place.country
        contact["latitude"] = place.latitude
        contact["longitude"] = place.longitude
        contact["state"] = place.state
        contact["city"] = place.city
        contact["status"] = CONTACT_FOUND

        logger.info("[ContactLookup] done last_name=%s zipcode=%s city=%s", last_name, entry.zip_code, place.city)
        return contact
