from typing import Any, Dict

from fastapi import APIRouter, Depends

from mainframe_orchestrator.api.dependencies import get_contact_orchestrator
from mainframe_orchestrator.orchestration import ContactOrchestrator

router = APIRouter(tags=["Phonebook"])


@router.get("/phone/contact/{lname}")
async def get_contact_info(lname: str, orchestrator: ContactOrchestrator = Depends(get_contact_orchestrator)) -> Dict[str, Any]:
    """
    Phonebook contact by last name, enriched with the postal code details
    (country, city, state, latitude, longitude) of the contact's zip code.
    """
    return await orchestrator.get_contact(lname)
