from typing import Any, Dict

from fastapi import APIRouter, Depends

from mainframe_orchestrator.api.dependencies import get_order_orchestrator
from mainframe_orchestrator.integrations.contracts.orders import OrderRequest
from mainframe_orchestrator.orchestration import OrderOrchestrator

router = APIRouter(tags=["Catalog"])


@router.post("/product/mobile/order")
async def process_order(order: OrderRequest, orchestrator: OrderOrchestrator = Depends(get_order_orchestrator)) -> Dict[str, Any]:
    """
    Order a mobile phone from the CICS catalog.

    Example payload:
    {
        "item": "0010",
        "userid": "USER0001",
        "dept": "DEPT0001",
        "qty": 2,
        "street": "555 Bailey Ave",
        "city": "San Jose",
        "state": "CA",
        "zipcode": "95141"
    }
    """
    return await orchestrator.place_order(order)
