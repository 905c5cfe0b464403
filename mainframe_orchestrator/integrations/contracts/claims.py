"""
Claim rule contracts - the submitted claim and the per-type threshold rule.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class ClaimRequest(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    claim_type: str = Field(..., alias="claimType")
    claim_amount: Decimal = Field(..., alias="claimAmount")


@dataclass(frozen=True)
class ClaimRule:
    claim_type: str
    limit: Decimal

    @property
    def limit_text(self) -> str:
        return f"${self.limit.normalize():f}"

    @property
    def reason(self) -> str:
        return f"Amount exceeded {self.limit_text}. Claim require further review."

    def is_exceeded(self, amount: Decimal) -> bool:
        return amount > self.limit
