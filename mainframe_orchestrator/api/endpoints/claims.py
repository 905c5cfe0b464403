from decimal import Decimal
from typing import Any, Dict

from fastapi import APIRouter, Depends, Query

from mainframe_orchestrator.api.dependencies import get_claim_evaluator
from mainframe_orchestrator.integrations.contracts.claims import ClaimRequest
from mainframe_orchestrator.orchestration import ClaimRuleEvaluator

router = APIRouter(tags=["Claims"])


@router.get("/claim/rule")
async def get_claim_result(
    claim_type: str = Query(..., alias="claimType"),
    claim_amount: Decimal = Query(..., alias="claimAmount"),
    evaluator: ClaimRuleEvaluator = Depends(get_claim_evaluator),
) -> Dict[str, Any]:
    return evaluator.evaluate(ClaimRequest(claimType=claim_type, claimAmount=claim_amount))


# Same rule for callers that can only POST (z/OS Connect API requester)
@router.post("/claim/rule")
async def post_claim_result(claim: ClaimRequest, evaluator: ClaimRuleEvaluator = Depends(get_claim_evaluator)) -> Dict[str, Any]:
    return evaluator.evaluate(claim)
