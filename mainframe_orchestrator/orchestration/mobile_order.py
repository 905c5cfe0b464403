"""
Mobile order flow - place order in CICS, read item details, log order to Db2
"""

import logging
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict, Optional

from mainframe_orchestrator.integrations.contracts.interfaces import CatalogClient, OrderLogClient
from mainframe_orchestrator.integrations.contracts.orders import (
    OrderRequest,
    build_cics_order_request,
    build_order_log_record,
)
from mainframe_orchestrator.integrations.policy.response_wrappers import (
    normalize_catalog_item_response,
    normalize_order_placement_response,
)

logger = logging.getLogger(__name__)

ORDER_NOT_SUBMITTED = "ORDER NOT SUBMITTED"

_CENTS = Decimal("0.01")


def format_amount(value: Decimal) -> str:
    """Two decimal places, half-up."""
    return str(value.quantize(_CENTS, rounding=ROUND_HALF_UP))


class OrderOrchestrator:
    def __init__(
        self,
        catalog: CatalogClient,
        order_log: Optional[OrderLogClient] = None,
        success_message: str = "ORDER SUCCESSFULLY PLACED",
    ):
        self.catalog = catalog
        # None gives the two-call variant: nothing is recorded in Db2
        self.order_log = order_log
        self.success_message = success_message

    async def place_order(self, order: OrderRequest) -> Dict[str, Any]:
        """Place an order and return the merged order summary.

        Only an order the catalog manager reports as placed goes on to the
        item inquiry and the Db2 log. Anything else returns the input echo with
        ORDER NOT SUBMITTED.
        """
        result: Dict[str, Any] = {}
        logger.info("[MobileOrder] start item=%s qty=%s userid=%s", order.item, order.qty, order.userid)

        placement = normalize_order_placement_response(
            await self.catalog.place_order(build_cics_order_request(order))
        )
        if placement.message != self.success_message:
            logger.info("[MobileOrder] order rejected item=%s message=%s", order.item, placement.message)
            result["item"] = order.item
            result["qty"] = order.qty
            result["status"] = ORDER_NOT_SUBMITTED
            return result

        item = normalize_catalog_item_response(await self.catalog.get_item(order.item))

        result["item"] = order.item
        result["order-qty"] = order.qty
        result["desc"] = item.description
        result["updated-stock"] = item.stock
        result["unit-cost"] = format_amount(item.unit_cost)
        result["total-cost"] = format_amount(item.unit_cost * order.qty)
        result["status"] = placement.message

        if self.order_log is not None:
            await self.order_log.log_order(build_order_log_record(order, item.description))
            logger.info("[MobileOrder] order logged item=%s userid=%s", order.item, order.userid)

        return result
