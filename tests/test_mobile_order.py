"""Tests for the CICS order -> item inquiry -> Db2 log orchestration."""

from decimal import Decimal

import pytest

from mainframe_orchestrator.error_handler import UpstreamUnavailable
from mainframe_orchestrator.integrations.contracts.orders import OrderRequest
from mainframe_orchestrator.orchestration import OrderOrchestrator
from mainframe_orchestrator.orchestration.mobile_order import ORDER_NOT_SUBMITTED, format_amount


def make_order(**overrides):
    data = {
        "item": "0010",
        "userid": "USER0001",
        "dept": "DEPT0001",
        "qty": 2,
        "street": "555 Bailey Ave",
        "city": "San Jose",
        "state": "CA",
        "zipcode": "95141",
    }
    data.update(overrides)
    return OrderRequest(**data)


class FailingOrderLogClient:
    def __init__(self):
        self.calls = []

    async def log_order(self, record):
        self.calls.append(record)
        raise UpstreamUnavailable("db2 down", service="order_log", step="log_order", status_code=503)


@pytest.mark.asyncio
async def test_successful_order_merges_all_three_calls(order_orchestrator, catalog, order_log):
    result = await order_orchestrator.place_order(make_order())

    assert result == {
        "item": "0010",
        "order-qty": 2,
        "desc": "Apple iPhone X 64GB",
        "updated-stock": 118,
        "unit-cost": "799.00",
        "total-cost": "1598.00",
        "status": "ORDER SUCCESSFULLY PLACED",
    }
    assert [call["step"] for call in catalog.calls] == ["place_order", "get_item"]
    assert catalog.calls[0]["body"] == {
        "DFH0XCP1": {
            "CA_ORDER_REQUEST": {
                "CA_USERID": "USER0001",
                "CA_CHARGE_DEPT": "DEPT0001",
                "CA_ITEM_REF_NUMBER": "0010",
                "CA_QUANTITY_REQ": 2,
            }
        }
    }
    assert order_log.records[0]["item"] == "0010"
    assert order_log.records[0]["user"] == "USER0001"
    assert order_log.records[0]["desc"] == "Apple iPhone X 64GB"
    assert order_log.records[0]["zipcode"] == "95141"


@pytest.mark.asyncio
async def test_rejected_order_echoes_input_and_stops(order_orchestrator, catalog, order_log):
    result = await order_orchestrator.place_order(make_order(item="0040", qty=11))

    assert result == {"item": "0040", "qty": 11, "status": ORDER_NOT_SUBMITTED}
    assert [call["step"] for call in catalog.calls] == ["place_order"]
    assert order_log.calls == []


@pytest.mark.asyncio
async def test_unknown_item_is_not_submitted(order_orchestrator, order_log):
    result = await order_orchestrator.place_order(make_order(item="9999"))

    assert result["status"] == ORDER_NOT_SUBMITTED
    assert order_log.calls == []


@pytest.mark.asyncio
async def test_total_cost_keeps_two_decimals(order_orchestrator):
    result = await order_orchestrator.place_order(make_order(item="0020", qty=3))

    assert result["unit-cost"] == "719.99"
    assert result["total-cost"] == "2159.97"


@pytest.mark.asyncio
async def test_zero_padded_cost_is_formatted(catalog, order_log):
    catalog.items["0050"]["stock"] = 10
    orchestrator = OrderOrchestrator(catalog, order_log)

    result = await orchestrator.place_order(make_order(item="0050", qty=5))

    assert result["unit-cost"] == "2.90"
    assert result["total-cost"] == "14.50"


def test_format_amount_rounds_half_up():
    assert format_amount(Decimal("1.005")) == "1.01"
    assert format_amount(Decimal("7")) == "7.00"


@pytest.mark.asyncio
async def test_two_call_variant_skips_order_log(catalog):
    orchestrator = OrderOrchestrator(catalog, order_log=None)

    result = await orchestrator.place_order(make_order())

    assert result["status"] == "ORDER SUCCESSFULLY PLACED"
    assert [call["step"] for call in catalog.calls] == ["place_order", "get_item"]


@pytest.mark.asyncio
async def test_order_log_failure_surfaces_as_error(catalog):
    order_log = FailingOrderLogClient()
    orchestrator = OrderOrchestrator(catalog, order_log)

    with pytest.raises(UpstreamUnavailable) as excinfo:
        await orchestrator.place_order(make_order())

    assert excinfo.value.status_code == 503
    assert len(order_log.calls) == 1


def test_order_request_accepts_long_field_names():
    order = OrderRequest(
        itemNumber="0030",
        userID="USER0002",
        chargeDept="DEPT0002",
        orderQty=1,
        shiptoStreet="1 Main St",
        shiptoCity="Chicago",
        shiptoState="IL",
        shiptoZipcode="60601",
    )

    assert order.item == "0030"
    assert order.userid == "USER0002"
    assert order.dept == "DEPT0002"
    assert order.qty == 1
    assert order.zipcode == "60601"
