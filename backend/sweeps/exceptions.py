"""
Exception hierarchy for the sweep engine.

CycleAbortError subclasses stop a whole cycle before any transfer.
PerAccountError subclasses are isolated to the account being processed.
"""


class SweepError(Exception):
    """Base class for all sweep engine errors."""


class CycleAbortError(SweepError):
    """The cycle cannot proceed; no transfers are attempted."""


class AccountStoreUnavailableError(CycleAbortError):
    """The account list could not be fetched."""


class MasterWalletUnavailableError(CycleAbortError):
    """The master wallet credential could not be resolved."""


class PerAccountError(SweepError):
    """Failure scoped to a single account."""


class CredentialError(PerAccountError):
    """The deposit wallet credential could not be materialized."""


class TransferError(PerAccountError):
    """The transfer was rejected or reverted."""

    def __init__(self, message, txHash=None):
        self.txHash = txHash
        super().__init__(message)


class TransferUnconfirmedError(TransferError):
    """The transfer was broadcast but its outcome is unknown; it may still be mined."""


class QueryError(PerAccountError):
    """The deposit wallet balance could not be read."""


class PersistenceError(SweepError):
    """The store could not read or write an account's balances."""


class InsufficientAfterFeeError(SweepError):
    """The pending balance does not cover the transfer fee."""

    def __init__(self, pendingBalance, transferFee):
        self.pendingBalance = pendingBalance
        self.transferFee = transferFee
        super().__init__(
            f"Pending balance {pendingBalance} does not cover transfer fee {transferFee}"
        )
