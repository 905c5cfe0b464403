"""Tests for the real upstream clients against simulated transports."""

import json

import httpx
import pytest

from mainframe_orchestrator.error_handler import UpstreamUnavailable
from mainframe_orchestrator.integrations.clients.real_http import (
    RealCatalogClient,
    RealOrderLogClient,
    RealPhonebookClient,
    RealPostalCodeClient,
)
from mainframe_orchestrator.integrations.contracts.orders import OrderRequest
from mainframe_orchestrator.integrations.policy.response_wrappers import UpstreamResponseError
from mainframe_orchestrator.orchestration import ContactOrchestrator, OrderOrchestrator

GATEWAY = "http://gateway.test:16476"


class Recorder:
    """MockTransport handler that answers per path and keeps every request."""

    def __init__(self, routes):
        self.routes = routes
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        answer = self.routes.get(request.url.path)
        if answer is None:
            return httpx.Response(404, json={})
        if isinstance(answer, Exception):
            raise answer
        return answer

    def paths(self):
        return [request.url.path for request in self.requests]


def transport(recorder):
    return httpx.MockTransport(recorder)


@pytest.mark.asyncio
async def test_phonebook_client_calls_contact_path():
    recorder = Recorder({"/phonebook/contact/SMITH": httpx.Response(200, json={"OUTPUT_AREA": {"OUT_MESSAGE": "OK"}})})
    client = RealPhonebookClient(GATEWAY + "/", transport=transport(recorder))

    data = await client.get_contact("SMITH")

    assert data == {"OUTPUT_AREA": {"OUT_MESSAGE": "OK"}}
    assert recorder.requests[0].method == "GET"
    assert str(recorder.requests[0].url) == GATEWAY + "/phonebook/contact/SMITH"


@pytest.mark.asyncio
async def test_postal_client_uses_country_code():
    recorder = Recorder({"/ca/H2X": httpx.Response(200, json={"country": "Canada", "places": []})})
    client = RealPostalCodeClient("http://postal.test", country_code="ca", transport=transport(recorder))

    data = await client.get_place("H2X")

    assert data["country"] == "Canada"


@pytest.mark.asyncio
async def test_catalog_client_posts_commarea_and_queries_item():
    recorder = Recorder(
        {
            "/product/catalog/order/mobile": httpx.Response(200, json={"DFH0XCP1": {"CA_RESPONSE_MESSAGE": "ORDER SUCCESSFULLY PLACED"}}),
            "/product/catalog/mobile": httpx.Response(200, json={"DFH0XCP1": {}}),
        }
    )
    client = RealCatalogClient(GATEWAY, transport=transport(recorder))

    await client.place_order({"DFH0XCP1": {"CA_ORDER_REQUEST": {"CA_ITEM_REF_NUMBER": "0010"}}})
    await client.get_item("0010")

    order_request, item_request = recorder.requests
    assert order_request.method == "POST"
    assert json.loads(order_request.content) == {"DFH0XCP1": {"CA_ORDER_REQUEST": {"CA_ITEM_REF_NUMBER": "0010"}}}
    assert item_request.method == "GET"
    assert item_request.url.params["itemID"] == "0010"


@pytest.mark.asyncio
async def test_upstream_error_status_is_forwarded():
    recorder = Recorder({"/db2/catalog/order": httpx.Response(503, text="Db2 unavailable")})
    client = RealOrderLogClient(GATEWAY, transport=transport(recorder))

    with pytest.raises(UpstreamUnavailable) as excinfo:
        await client.log_order({"item": "0010"})

    assert excinfo.value.status_code == 503
    assert excinfo.value.service == "order_log"
    assert excinfo.value.detail == "Db2 unavailable"


@pytest.mark.asyncio
async def test_connection_failure_maps_to_500():
    recorder = Recorder({"/phonebook/contact/SMITH": httpx.ConnectError("connection refused")})
    client = RealPhonebookClient(GATEWAY, transport=transport(recorder))

    with pytest.raises(UpstreamUnavailable) as excinfo:
        await client.get_contact("SMITH")

    assert excinfo.value.status_code == 500
    assert "connection refused" in excinfo.value.detail


@pytest.mark.asyncio
async def test_non_json_body_is_a_response_error():
    recorder = Recorder({"/phonebook/contact/SMITH": httpx.Response(200, text="<html>gateway</html>")})
    client = RealPhonebookClient(GATEWAY, transport=transport(recorder))

    with pytest.raises(UpstreamResponseError) as excinfo:
        await client.get_contact("SMITH")

    assert excinfo.value.status_code == 502


@pytest.mark.asyncio
async def test_contact_flow_over_http_stops_after_not_found():
    recorder = Recorder(
        {
            "/phonebook/contact/DOE": httpx.Response(
                200, json={"OUTPUT_AREA": {"OUT_MESSAGE": "SPECIFIED PERSON WAS NOT FOUND"}}
            ),
        }
    )
    orchestrator = ContactOrchestrator(
        RealPhonebookClient(GATEWAY, transport=transport(recorder)),
        RealPostalCodeClient("http://postal.test", transport=transport(recorder)),
    )

    contact = await orchestrator.get_contact("DOE")

    assert contact == {"status": "Contact record not found"}
    assert recorder.paths() == ["/phonebook/contact/DOE"]


@pytest.mark.asyncio
async def test_order_flow_over_http_fails_when_item_inquiry_drops():
    recorder = Recorder(
        {
            "/product/catalog/order/mobile": httpx.Response(
                200, json={"DFH0XCP1": {"CA_RESPONSE_MESSAGE": "ORDER SUCCESSFULLY PLACED"}}
            ),
            "/product/catalog/mobile": httpx.ReadError("connection reset"),
        }
    )
    orchestrator = OrderOrchestrator(
        RealCatalogClient(GATEWAY, transport=transport(recorder)),
        RealOrderLogClient(GATEWAY, transport=transport(recorder)),
    )
    order = OrderRequest(item="0010", userid="USER0001", dept="DEPT0001", qty=1)

    with pytest.raises(UpstreamUnavailable) as excinfo:
        await orchestrator.place_order(order)

    assert excinfo.value.step == "get_item"
    assert recorder.paths() == ["/product/catalog/order/mobile", "/product/catalog/mobile"]
