"""
Claim rule - accept or reject a claim against the limit for its type
"""

import logging
from decimal import Decimal
from typing import Any, Dict, Mapping, Optional

from mainframe_orchestrator.integrations.contracts.claims import ClaimRequest, ClaimRule

logger = logging.getLogger(__name__)

ACCEPTED = "Accepted"
REJECTED = "Rejected"
NORMAL_CLAIM = "Normal claim"

DEFAULT_CLAIM_LIMITS: Dict[str, Decimal] = {
    "MEDICAL": Decimal("100"),
    "DENTAL": Decimal("800"),
    "DRUG": Decimal("1000"),
}


class ClaimRuleEvaluator:
    def __init__(self, limits: Optional[Mapping[str, Decimal]] = None):
        limits = DEFAULT_CLAIM_LIMITS if limits is None else limits
        self.rules: Dict[str, ClaimRule] = {
            claim_type: ClaimRule(claim_type=claim_type, limit=Decimal(limit))
            for claim_type, limit in limits.items()
        }

    def evaluate(self, claim: ClaimRequest) -> Dict[str, Any]:
        results: Dict[str, Any] = {
            "claim-type": claim.claim_type,
            "amount": f"{claim.claim_amount:f}",
        }

        # Claim types match exactly; an unknown type has no rule and no reason
        rule = self.rules.get(claim.claim_type)
        if rule is None:
            logger.info("[ClaimRule] no rule for claim type %r", claim.claim_type)
            results["status"] = ACCEPTED
            return results

        if not rule.is_exceeded(claim.claim_amount):
            results["status"] = ACCEPTED
            results["reason"] = NORMAL_CLAIM
            return results

        notice = (
            f"SHARE Demo: Submitted claim for {claim.claim_type} with amount ${claim.claim_amount:f} "
            f"exceeded {rule.limit_text} limit. Claim require further review."
        )
        logger.info("[ClaimRule] %s", notice)
        results["status"] = REJECTED
        results["reason"] = rule.reason
        results["notice"] = notice
        return results
