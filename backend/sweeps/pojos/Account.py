from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional


@dataclass
class Account:
    """
    Snapshot of a user account as seen by the sweep engine.

    depositWalletCredential is the deposit wallet secret. It is excluded from
    repr and comparisons and must never be logged or written back.
    """
    walletAddress: str
    depositWalletAddress: str
    depositWalletCredential: str = field(repr=False, compare=False)
    depositPendingBalance: Decimal = Decimal('0')
    confirmedBalance: Decimal = Decimal('0')
    accountId: Optional[int] = None

    def applyBalances(self, depositPendingBalance: Decimal, confirmedBalance: Decimal) -> None:
        """Set both ledgers together."""
        self.depositPendingBalance = depositPendingBalance
        self.confirmedBalance = confirmedBalance
