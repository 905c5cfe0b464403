from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, ValidationError

from mainframe_orchestrator.error_handler import UpstreamUnavailable


class UpstreamResponseError(UpstreamUnavailable):
    """Upstream answered, but the body is not the JSON shape we read from."""

    def __init__(self, message: str, *, service: str, step: str, payload: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message, service=service, step=step, status_code=502)
        self.payload = payload or {}


class PhonebookContactModel(BaseModel):
    message: str = ""
    last_name: str = ""
    first_name: str = ""
    extension: str = ""
    zip_code: str = ""
    raw: Dict[str, Any] = Field(default_factory=dict)


class PostalPlaceModel(BaseModel):
    country: str
    latitude: str
    longitude: str
    state: str
    city: str
    raw: Dict[str, Any] = Field(default_factory=dict)


class OrderPlacementModel(BaseModel):
    message: str
    raw: Dict[str, Any] = Field(default_factory=dict)


class CatalogItemModel(BaseModel):
    description: str
    stock: int
    unit_cost: Decimal
    raw: Dict[str, Any] = Field(default_factory=dict)


def normalize_phonebook_response(raw: Dict[str, Any]) -> PhonebookContactModel:
    output = _dig(raw, "OUTPUT_AREA", service="phonebook", step="get_contact")
    if not isinstance(output, dict):
        raise UpstreamResponseError("OUTPUT_AREA is not an object.", service="phonebook", step="get_contact", payload=raw)

    return _build_model(
        PhonebookContactModel,
        {
            "message": _text(output.get("OUT_MESSAGE")),
            "last_name": _text(output.get("OUT_LAST_NAME")),
            "first_name": _text(output.get("OUT_FIRST_NAME")),
            "extension": _text(output.get("OUT_EXTENSION")),
            "zip_code": _text(output.get("OUT_ZIP_CODE")),
            "raw": raw,
        },
        raw,
        service="phonebook",
        step="get_contact",
    )


def normalize_postal_code_response(raw: Dict[str, Any]) -> PostalPlaceModel:
    places = _dig(raw, "places", service="postal_codes", step="get_place")
    if not isinstance(places, list) or not places or not isinstance(places[0], dict):
        raise UpstreamResponseError("Postal code response has no places.", service="postal_codes", step="get_place", payload=raw)

    place = places[0]
    return _build_model(
        PostalPlaceModel,
        {
            "country": _text(raw.get("country")),
            "latitude": _text(place.get("latitude")),
            "longitude": _text(place.get("longitude")),
            "state": _text(place.get("state")),
            "city": _text(place.get("place name")),
            "raw": raw,
        },
        raw,
        service="postal_codes",
        step="get_place",
    )


def normalize_order_placement_response(raw: Dict[str, Any]) -> OrderPlacementModel:
    message = _dig(raw, "DFH0XCP1", "CA_RESPONSE_MESSAGE", service="catalog", step="place_order")
    return _build_model(
        OrderPlacementModel,
        {"message": _text(message), "raw": raw},
        raw,
        service="catalog",
        step="place_order",
    )


def normalize_catalog_item_response(raw: Dict[str, Any]) -> CatalogItemModel:
    item = _dig(raw, "DFH0XCP1", "CA_INQUIRE_SINGLE", "CA_SINGLE_ITEM", service="catalog", step="get_item")
    if not isinstance(item, dict):
        raise UpstreamResponseError("CA_SINGLE_ITEM is not an object.", service="catalog", step="get_item", payload=raw)

    return _build_model(
        CatalogItemModel,
        {
            "description": _text(item.get("CA_SNGL_DESCRIPTION")),
            "stock": item.get("IN_SNGL_STOCK"),
            "unit_cost": _coerce_cost(item.get("CA_SNGL_COST", "0"), raw),
            "raw": raw,
        },
        raw,
        service="catalog",
        step="get_item",
    )


def _dig(data: Dict[str, Any], *path: str, service: str, step: str) -> Any:
    current: Any = data
    for key in path:
        if not isinstance(current, dict) or key not in current:
            raise UpstreamResponseError(
                f"Missing required field: {'.'.join(path)}",
                service=service,
                step=step,
                payload=data,
            )
        current = current[key]
    return current


def _text(value: Any) -> str:
    # IMS and CICS pad fixed-length fields with blanks
    if value is None:
        return ""
    return str(value).strip()


def _coerce_cost(value: Any, raw: Dict[str, Any]) -> Decimal:
    try:
        return Decimal(str(value).strip())
    except (InvalidOperation, ValueError) as exc:
        raise UpstreamResponseError(
            f"Invalid item cost: {value!r}", service="catalog", step="get_item", payload=raw
        ) from exc


def _build_model(model_type, payload: Dict[str, Any], raw: Dict[str, Any], *, service: str, step: str):
    try:
        return model_type(**payload)
    except ValidationError as exc:
        raise UpstreamResponseError(
            f"Response validation failed: {exc}", service=service, step=step, payload=raw
        ) from exc
