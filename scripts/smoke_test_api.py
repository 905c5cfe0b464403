#!/usr/bin/env python3
"""
Smoke test for a running orchestrator: banner, contact lookup, order, claim rule.

Start the API first (in another terminal):
  INTEGRATIONS_MODE=mock uvicorn mainframe_orchestrator.api.main:app --host 127.0.0.1 --port 50001

Then run this script:
  python scripts/smoke_test_api.py
  python scripts/smoke_test_api.py --base-url http://127.0.0.1:50001 --last-name SMITH
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Dict

import requests


def post_json(url: str, data: Dict[str, Any], timeout: int = 30) -> Dict[str, Any]:
    r = requests.post(url, json=data, timeout=timeout)
    r.raise_for_status()
    return r.json()


def get_json(url: str, params: Dict[str, Any] | None = None, timeout: int = 30) -> Dict[str, Any]:
    r = requests.get(url, params=params, timeout=timeout)
    r.raise_for_status()
    return r.json()


def main() -> int:
    parser = argparse.ArgumentParser(description="Smoke test the orchestration endpoints")
    parser.add_argument("--base-url", default="http://localhost:50001", help="API base URL")
    parser.add_argument("--last-name", default="SMITH", help="Phonebook last name to look up")
    parser.add_argument("--item", default="0010", help="Catalog item to order")
    args = parser.parse_args()
    base = args.base_url.rstrip("/")

    print(f"Base URL: {base}\n")

    print("1) GET /")
    try:
        r = requests.get(f"{base}/", timeout=30)
        r.raise_for_status()
        print(r.text)
    except requests.RequestException as e:
        print(f"   FAIL: {e}")
        if "Connection refused" in str(e) or "Failed to establish" in str(e):
            print("   → Start the API first: uvicorn mainframe_orchestrator.api.main:app --port 50001")
        return 1

    print(f"2) GET /phone/contact/{args.last_name}")
    try:
        print(json.dumps(get_json(f"{base}/phone/contact/{args.last_name}"), indent=2))
    except requests.RequestException as e:
        print(f"   FAIL: {e}")
        if hasattr(e, "response") and e.response is not None:
            print(f"   body: {e.response.text[:500]}")
        return 1

    print(f"\n3) POST /product/mobile/order (item {args.item})")
    order = {
        "item": args.item,
        "userid": "SMOKE001",
        "dept": "DEPT0001",
        "qty": 1,
        "street": "555 Bailey Ave",
        "city": "San Jose",
        "state": "CA",
        "zipcode": "95141",
    }
    try:
        print(json.dumps(post_json(f"{base}/product/mobile/order", order), indent=2))
    except requests.RequestException as e:
        print(f"   FAIL: {e}")
        if hasattr(e, "response") and e.response is not None:
            print(f"   body: {e.response.text[:500]}")
        return 1

    print("\n4) GET /claim/rule")
    for claim_type, amount in (("MEDICAL", 150), ("DENTAL", 500)):
        try:
            out = get_json(f"{base}/claim/rule", params={"claimType": claim_type, "claimAmount": amount})
            print(f"   {claim_type} {amount}: {out.get('status')} - {out.get('reason', '')}")
        except requests.RequestException as e:
            print(f"   FAIL: {e}")
            return 1

    print("\nAll checks passed.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
