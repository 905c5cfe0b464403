#!/usr/bin/env python3
"""
Run the contact lookup, mobile order and claim rule flows against the mock
upstream clients and print each stage to the terminal.

Usage (from repo root):
  python scripts/run_orchestration_demo.py
"""

from __future__ import annotations

import asyncio
import json
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from mainframe_orchestrator.integrations.clients.mocks import (
    MockCatalogClient,
    MockOrderLogClient,
    MockPhonebookClient,
    MockPostalCodeClient,
)
from mainframe_orchestrator.integrations.contracts.claims import ClaimRequest
from mainframe_orchestrator.integrations.contracts.orders import OrderRequest
from mainframe_orchestrator.orchestration import ClaimRuleEvaluator, ContactOrchestrator, OrderOrchestrator


def setup_logging():
    """Log to terminal at INFO so every upstream call is visible."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stdout,
    )


def print_stage(title: str, data: dict | list | str):
    """Print a stage header and data to the terminal."""
    print("\n" + "=" * 60)
    print(f"  {title}")
    print("=" * 60)
    if isinstance(data, (dict, list)):
        print(json.dumps(data, indent=2, default=str))
    else:
        print(data)
    print()


async def main():
    setup_logging()

    # --- Contact lookup ---
    contacts = ContactOrchestrator(MockPhonebookClient(), MockPostalCodeClient())
    print_stage("CONTACT: SMITH", await contacts.get_contact("SMITH"))
    print_stage("CONTACT: unknown last name", await contacts.get_contact("NOBODY"))

    # --- Mobile order ---
    order_log = MockOrderLogClient()
    orders = OrderOrchestrator(MockCatalogClient(), order_log)
    order = OrderRequest(
        item="0020",
        userid="DEMOUSER",
        dept="DEPT0001",
        qty=3,
        street="555 Bailey Ave",
        city="San Jose",
        state="CA",
        zipcode="95141",
    )
    print_stage("ORDER: 3 x item 0020", await orders.place_order(order))
    print_stage("ORDER: Db2 order log rows", order_log.records)

    too_many = order.model_copy(update={"item": "0040", "qty": 50})
    print_stage("ORDER: more than in stock", await orders.place_order(too_many))

    # --- Claim rule ---
    evaluator = ClaimRuleEvaluator()
    for claim_type, amount in (("MEDICAL", "80"), ("MEDICAL", "250"), ("DENTAL", "900"), ("VISION", "10")):
        result = evaluator.evaluate(ClaimRequest(claimType=claim_type, claimAmount=amount))
        print_stage(f"CLAIM: {claim_type} {amount}", result)

    print("\n" + "=" * 60)
    print("  Demo complete. Check logs above for each upstream call.")
    print("=" * 60 + "\n")


if __name__ == "__main__":
    asyncio.run(main())
