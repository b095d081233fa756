from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class SweepDecision:
    eligible: bool
    transferAmount: Optional[Decimal] = None

    @classmethod
    def ineligible(cls) -> 'SweepDecision':
        return cls(eligible=False)

    @classmethod
    def sweep(cls, transferAmount: Decimal) -> 'SweepDecision':
        return cls(eligible=True, transferAmount=transferAmount)
