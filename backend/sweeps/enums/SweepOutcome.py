"""
Enum for the outcome of processing one eligible account.
"""
from enum import Enum


class SweepOutcome(Enum):
    SWEPT = "swept"
    SKIPPED_INSUFFICIENT_AFTER_FEE = "skipped_insufficient_after_fee"
    RELOAD_FAILED = "reload_failed"
    CREDENTIAL_FAILED = "credential_failed"
    TRANSFER_FAILED = "transfer_failed"
    TRANSFER_UNCONFIRMED = "transfer_unconfirmed"
    BALANCE_QUERY_FAILED = "balance_query_failed"
    PERSISTENCE_FAILED = "persistence_failed"

    def isSuccess(self) -> bool:
        return self == SweepOutcome.SWEPT

    def isSkipped(self) -> bool:
        return self == SweepOutcome.SKIPPED_INSUFFICIENT_AFTER_FEE

    def isFailure(self) -> bool:
        return not self.isSuccess() and not self.isSkipped()

    def fundsMoved(self) -> bool:
        """Whether the on-chain transfer is known to have gone through."""
        return self in (
            SweepOutcome.SWEPT,
            SweepOutcome.BALANCE_QUERY_FAILED,
            SweepOutcome.PERSISTENCE_FAILED,
        )

    def leavesLedgerStale(self) -> bool:
        """
        Funds moved, or may still move, on-chain without a ledger update.
        A broadcast transfer whose receipt never arrived can be mined later.
        """
        return self == SweepOutcome.TRANSFER_UNCONFIRMED or (self.fundsMoved() and not self.isSuccess())
