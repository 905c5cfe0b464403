"""
Shared HTTP call used by every real upstream client.

One AsyncClient per call, no retries. Transport failures and non-2xx answers
become UpstreamUnavailable; bodies that are not a JSON object become
UpstreamResponseError.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from mainframe_orchestrator.error_handler import UpstreamUnavailable
from mainframe_orchestrator.integrations.policy.response_wrappers import UpstreamResponseError

logger = logging.getLogger(__name__)


async def request_json(
    method: str,
    url: str,
    *,
    service: str,
    step: str,
    timeout_seconds: Optional[float] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
    **kwargs: Any,
) -> Dict[str, Any]:
    logger.info(f"Calling {service} ({step}): {method} {url}")
    try:
        async with httpx.AsyncClient(timeout=timeout_seconds, transport=transport, follow_redirects=True) as client:
            response = await client.request(method, url, **kwargs)
            response.raise_for_status()
    except httpx.HTTPStatusError as e:
        logger.error(f"HTTP error from {service}: {e.response.status_code} {e.response.text}")
        raise UpstreamUnavailable(
            f"{service} answered {e.response.status_code}",
            service=service,
            step=step,
            status_code=e.response.status_code,
            detail=e.response.text or str(e),
        ) from e
    except httpx.RequestError as e:
        logger.error(f"Request error connecting to {service}: {e!r}")
        raise UpstreamUnavailable(
            f"Could not reach {service}",
            service=service,
            step=step,
            status_code=500,
            detail=str(e) or type(e).__name__,
        ) from e

    logger.info(f"Received {service} response: status={response.status_code}")
    if not response.content:
        return {}
    try:
        data = response.json()
    except ValueError as e:
        raise UpstreamResponseError(f"{service} returned a non-JSON body", service=service, step=step) from e
    if not isinstance(data, dict):
        raise UpstreamResponseError(f"{service} returned JSON that is not an object", service=service, step=step)
    return data
