"""
Orchestration flows.

Each flow turns one inbound request into a strictly ordered chain of upstream
calls, with a single success/rejection decision on the first call's answer.
"""

from .claim_rules import ClaimRuleEvaluator
from .contact_lookup import ContactOrchestrator
from .mobile_order import OrderOrchestrator

__all__ = ["ClaimRuleEvaluator", "ContactOrchestrator", "OrderOrchestrator"]
