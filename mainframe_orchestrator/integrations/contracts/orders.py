"""
Mobile order contracts.

Defines the inbound order request and the two upstream bodies derived from it:
- the CICS DFH0XCP1 commarea used to place the order
- the Db2 row used to record it

Callers going through the z/OS Connect API requester send the long field names
(itemNumber, userID, chargeDept, ...); browser and curl callers send the short ones.
Both are accepted.
"""

from __future__ import annotations

from typing import Any, Dict

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class OrderRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    item: str = Field(..., min_length=1, validation_alias=AliasChoices("item", "itemNumber"))
    userid: str = Field(..., min_length=1, max_length=8, validation_alias=AliasChoices("userid", "userID"))
    dept: str = Field(..., min_length=1, max_length=8, validation_alias=AliasChoices("dept", "chargeDept"))
    qty: int = Field(..., ge=1, le=999, validation_alias=AliasChoices("qty", "orderQty"))
    street: str = Field("", validation_alias=AliasChoices("street", "shiptoStreet"))
    city: str = Field("", validation_alias=AliasChoices("city", "shiptoCity"))
    state: str = Field("", validation_alias=AliasChoices("state", "shiptoState"))
    zipcode: str = Field("", validation_alias=AliasChoices("zipcode", "shiptoZipcode"))


def build_cics_order_request(order: OrderRequest) -> Dict[str, Any]:
    """Commarea JSON for the 'order an item' catalog function."""
    return {
        "DFH0XCP1": {
            "CA_ORDER_REQUEST": {
                "CA_USERID": order.userid,
                "CA_CHARGE_DEPT": order.dept,
                "CA_ITEM_REF_NUMBER": order.item,
                "CA_QUANTITY_REQ": order.qty,
            }
        }
    }


def build_order_log_record(order: OrderRequest, description: str) -> Dict[str, Any]:
    return {
        "item": order.item,
        "user": order.userid,
        "desc": description,
        "dept": order.dept,
        "qty": order.qty,
        "street": order.street,
        "city": order.city,
        "state": order.state,
        "zipcode": order.zipcode,
    }
