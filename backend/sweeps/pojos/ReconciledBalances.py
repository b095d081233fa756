from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class ReconciledBalances:
    """New ledger values computed after a sweep."""
    depositPendingBalance: Decimal
    confirmedBalance: Decimal
    detectedDeposit: Decimal = Decimal('0')

    @property
    def depositDetected(self) -> bool:
        """Whether a deposit landed while the sweep was in flight"""
        return self.detectedDeposit > 0
