"""
POJO classes for sweep cycle results.
One AccountSweepResult per eligible account, collected into a SweepCycleReport.
"""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from typing import List, Optional

from sweeps.Constants import REPORT_ERROR_LIMIT
from sweeps.enums.SweepOutcome import SweepOutcome


@dataclass
class AccountSweepResult:
    """Outcome of processing a single eligible account"""
    walletAddress: str
    outcome: SweepOutcome
    transferAmount: Optional[Decimal] = None
    transactionReference: Optional[str] = None
    preSweepPending: Optional[Decimal] = None
    postSweepObserved: Optional[Decimal] = None
    detectedDeposit: Decimal = Decimal('0')
    errorMessage: Optional[str] = None

    def toDict(self) -> dict:
        return {
            'walletAddress': self.walletAddress,
            'outcome': self.outcome.value,
            'transferAmount': str(self.transferAmount) if self.transferAmount is not None else None,
            'transactionReference': self.transactionReference,
            'preSweepPending': str(self.preSweepPending) if self.preSweepPending is not None else None,
            'postSweepObserved': str(self.postSweepObserved) if self.postSweepObserved is not None else None,
            'detectedDeposit': str(self.detectedDeposit),
            'errorMessage': self.errorMessage,
        }


@dataclass
class SweepCycleReport:
    """Overall statistics for one collection cycle"""
    cycleNumber: int = 0
    startTime: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    endTime: Optional[datetime] = None
    totalAccounts: int = 0
    eligibleAccounts: int = 0
    results: List[AccountSweepResult] = field(default_factory=list)
    aborted: bool = False
    abortReason: Optional[str] = None

    def addResult(self, result: AccountSweepResult) -> None:
        self.results.append(result)

    def markAborted(self, reason: str) -> None:
        self.aborted = True
        self.abortReason = reason

    def finish(self) -> 'SweepCycleReport':
        self.endTime = datetime.now(timezone.utc)
        return self

    @property
    def succeeded(self) -> int:
        return sum(1 for r in self.results if r.outcome.isSuccess())

    @property
    def failed(self) -> int:
        return sum(1 for r in self.results if r.outcome.isFailure())

    @property
    def skipped(self) -> int:
        return sum(1 for r in self.results if r.outcome.isSkipped())

    @property
    def totalSwept(self) -> Decimal:
        return sum((r.transferAmount for r in self.results if r.outcome.fundsMoved()), Decimal('0'))

    @property
    def unreconciledTransfers(self) -> List[AccountSweepResult]:
        """Transfers that moved funds without a matching ledger update"""
        return [r for r in self.results if r.outcome.leavesLedgerStale()]

    @property
    def durationSeconds(self) -> float:
        if self.endTime is None:
            return 0.0
        return (self.endTime - self.startTime).total_seconds()

    def hasErrors(self) -> bool:
        return self.aborted or self.failed > 0

    def toDict(self) -> dict:
        errors = [
            {'walletAddress': r.walletAddress, 'outcome': r.outcome.value, 'error': r.errorMessage}
            for r in self.results if r.outcome.isFailure()
        ]
        return {
            'cycleNumber': self.cycleNumber,
            'aborted': self.aborted,
            'abortReason': self.abortReason,
            'totalAccounts': self.totalAccounts,
            'eligibleAccounts': self.eligibleAccounts,
            'succeeded': self.succeeded,
            'failed': self.failed,
            'skipped': self.skipped,
            'totalSwept': str(self.totalSwept),
            'unreconciledTransfers': [r.toDict() for r in self.unreconciledTransfers],
            'errorCount': len(errors),
            'errors': errors[:REPORT_ERROR_LIMIT],
            'durationSeconds': round(self.durationSeconds, 2),
            'startTime': self.startTime.strftime('%Y-%m-%d %H:%M:%S'),
        }
