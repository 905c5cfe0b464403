"""Tests for the claim threshold rule."""

from decimal import Decimal

import pytest

from mainframe_orchestrator.integrations.contracts.claims import ClaimRequest
from mainframe_orchestrator.orchestration import ClaimRuleEvaluator


def claim(claim_type, amount):
    return ClaimRequest(claimType=claim_type, claimAmount=amount)


@pytest.fixture
def evaluator():
    return ClaimRuleEvaluator()


@pytest.mark.parametrize(
    "claim_type, amount, limit",
    [("MEDICAL", "100.01", "$100"), ("DENTAL", "801", "$800"), ("DRUG", "1500", "$1000")],
)
def test_amount_over_limit_is_rejected(evaluator, claim_type, amount, limit):
    result = evaluator.evaluate(claim(claim_type, amount))

    assert result["status"] == "Rejected"
    assert result["reason"] == f"Amount exceeded {limit}. Claim require further review."
    assert result["claim-type"] == claim_type
    assert result["amount"] == amount
    assert f"exceeded {limit} limit" in result["notice"]


@pytest.mark.parametrize("claim_type, amount", [("MEDICAL", "100"), ("DENTAL", "800"), ("DRUG", "999.99")])
def test_amount_at_or_below_limit_is_accepted(evaluator, claim_type, amount):
    result = evaluator.evaluate(claim(claim_type, amount))

    assert result == {"claim-type": claim_type, "amount": amount, "status": "Accepted", "reason": "Normal claim"}


def test_unknown_claim_type_has_no_reason(evaluator):
    result = evaluator.evaluate(claim("VISION", "5000"))

    assert result == {"claim-type": "VISION", "amount": "5000", "status": "Accepted"}
    assert "reason" not in result


def test_claim_type_match_is_case_sensitive(evaluator):
    result = evaluator.evaluate(claim("medical", "5000"))

    assert result["status"] == "Accepted"
    assert "reason" not in result


def test_configured_medical_limit_replaces_default():
    evaluator = ClaimRuleEvaluator({"MEDICAL": Decimal("500"), "DENTAL": Decimal("800"), "DRUG": Decimal("1000")})

    assert evaluator.evaluate(claim("MEDICAL", "400"))["status"] == "Accepted"
    rejected = evaluator.evaluate(claim("MEDICAL", "501"))
    assert rejected["reason"] == "Amount exceeded $500. Claim require further review."


def test_exponent_amount_is_echoed_in_plain_notation(evaluator):
    result = evaluator.evaluate(claim("DENTAL", "1e3"))

    assert result["amount"] == "1000"
    assert result["status"] == "Rejected"
    assert "with amount $1000 exceeded" in result["notice"]
