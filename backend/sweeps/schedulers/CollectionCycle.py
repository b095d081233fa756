"""
Collection Cycle - one pass over every account.

Fetches the accounts, resolves the master wallet, and sweeps each eligible
deposit wallet under its wallet guard. Failures are isolated per account and
recorded in the returned SweepCycleReport.
"""
import logging
from decimal import Decimal
from typing import Any, Optional

from sweeps.SweepContext import SweepContext
from sweeps.SweepMetrics import SweepMetrics
from sweeps.enums.SweepOutcome import SweepOutcome
from sweeps.exceptions import (
    AccountStoreUnavailableError,
    CycleAbortError,
    InsufficientAfterFeeError,
    MasterWalletUnavailableError,
    PersistenceError,
    SweepError,
    TransferError,
    TransferUnconfirmedError,
)
from sweeps.pojos.Account import Account
from sweeps.pojos.SweepCycleReport import AccountSweepResult, SweepCycleReport
from sweeps.services.ReconciliationService import ReconciliationService
from sweeps.services.SweepDecisionService import SweepDecisionService

logger = logging.getLogger(__name__)


class CollectionCycle:

    def __init__(self, context: SweepContext):
        self.context = context

    def run(self, cycleNumber: int = 0) -> SweepCycleReport:
        report = SweepCycleReport(cycleNumber=cycleNumber)
        logger.info("SWEEP_CYCLE :: Starting | Cycle: %d", cycleNumber)

        try:
            accounts = self.fetchAccounts()
            masterWallet = self.resolveMasterWallet()
        except CycleAbortError as e:
            report.markAborted(str(e))
            report.finish()
            SweepMetrics.recordCycleAborted(report.durationSeconds)
            logger.error("SWEEP_CYCLE :: Aborted | Cycle: %d | Reason: %s", cycleNumber, str(e))
            return report

        report.totalAccounts = len(accounts)
        for account in accounts:
            try:
                self.processAccount(account, masterWallet.address, report)
            except Exception as e:
                # Malformed account data must not block the rest of the batch
                logger.error(
                    "SWEEP_CYCLE :: Unexpected error | Wallet: %s | Error: %s | Type: %s",
                    getattr(account, 'walletAddress', None), str(e), type(e).__name__,
                    exc_info=True
                )

        report.finish()
        SweepMetrics.recordCycleCompleted(report.durationSeconds)

        logger.info(
            "SWEEP_CYCLE :: Completed | Cycle: %d | Accounts: %d | Eligible: %d | "
            "Succeeded: %d | Failed: %d | Skipped: %d | Swept: %s | Duration: %.2fs",
            cycleNumber, report.totalAccounts, report.eligibleAccounts,
            report.succeeded, report.failed, report.skipped, report.totalSwept, report.durationSeconds
        )
        if report.unreconciledTransfers:
            logger.error(
                "SWEEP_CYCLE :: Unreconciled transfers need attention | Cycle: %d | Wallets: %s",
                cycleNumber, [r.walletAddress for r in report.unreconciledTransfers]
            )

        return report

    def fetchAccounts(self):
        try:
            accounts = self.context.accountStore.listAll()
        except AccountStoreUnavailableError:
            raise
        except Exception as e:
            raise AccountStoreUnavailableError(f"Couldn't get accounts list: {e}") from e

        if accounts is None:
            raise AccountStoreUnavailableError("Couldn't get accounts list")
        return accounts

    def resolveMasterWallet(self) -> Any:
        try:
            masterWallet = self.context.masterWalletResolver.resolve()
        except MasterWalletUnavailableError:
            raise
        except Exception as e:
            raise MasterWalletUnavailableError(f"Master wallet unavailable: {e}") from e

        if masterWallet is None:
            raise MasterWalletUnavailableError("Master wallet is not configured")
        return masterWallet

    def processAccount(self, account: Account, masterAddress: str, report: SweepCycleReport) -> None:
        # The listed snapshot only filters; the decision is made on balances re-read under the guard
        if account.depositPendingBalance < self.context.config.collectThreshold:
            return

        with self.context.walletLocks.acquire(account.walletAddress):
            result = self.collectAccount(account, masterAddress, report)

        if result is not None:
            self.recordResult(report, result)

    def collectAccount(self, listed: Account, masterAddress: str,
                       report: SweepCycleReport) -> Optional[AccountSweepResult]:
        """Reload, decide and sweep one account. Caller holds the wallet guard."""
        try:
            account = self.reloadAccount(listed)
        except PersistenceError as e:
            report.eligibleAccounts += 1
            return self.fail(AccountSweepResult(
                walletAddress=listed.walletAddress,
                outcome=SweepOutcome.RELOAD_FAILED,
                preSweepPending=listed.depositPendingBalance,
            ), SweepOutcome.RELOAD_FAILED, e)

        try:
            decision = SweepDecisionService.evaluate(account, self.context.config)
        except InsufficientAfterFeeError as e:
            report.eligibleAccounts += 1
            logger.warning("SWEEP_CYCLE :: Skipped | Wallet: %s | %s", account.walletAddress, str(e))
            return AccountSweepResult(
                walletAddress=account.walletAddress,
                outcome=SweepOutcome.SKIPPED_INSUFFICIENT_AFTER_FEE,
                preSweepPending=account.depositPendingBalance,
                errorMessage=str(e),
            )

        if not decision.eligible:
            logger.info(
                "SWEEP_CYCLE :: No longer eligible | Wallet: %s | Pending: %s",
                account.walletAddress, account.depositPendingBalance
            )
            return None

        report.eligibleAccounts += 1
        return self.sweepAccount(account, decision.transferAmount, masterAddress)

    def reloadAccount(self, listed: Account) -> Account:
        try:
            account = self.context.accountStore.reload(listed)
        except PersistenceError:
            raise
        except Exception as e:
            raise PersistenceError(f"Couldn't reload account: {e}") from e

        if account is None:
            raise PersistenceError("Account no longer exists")
        return account

    def sweepAccount(self, account: Account, transferAmount: Decimal, masterAddress: str) -> AccountSweepResult:
        """Transfer, re-read, reconcile and persist one account. Caller holds the wallet guard."""
        preSweepPending = account.depositPendingBalance
        result = AccountSweepResult(
            walletAddress=account.walletAddress,
            outcome=SweepOutcome.SWEPT,
            transferAmount=transferAmount,
            preSweepPending=preSweepPending,
        )

        try:
            fromCredential = self.context.credentialLoader.load(account.depositWalletCredential)
        except Exception as e:
            return self.fail(result, SweepOutcome.CREDENTIAL_FAILED, e)

        try:
            result.transactionReference = self.context.transferService.send(fromCredential, masterAddress, transferAmount)
        except TransferUnconfirmedError as e:
            result.transactionReference = e.txHash
            return self.fail(result, SweepOutcome.TRANSFER_UNCONFIRMED, e)
        except TransferError as e:
            result.transactionReference = e.txHash
            return self.fail(result, SweepOutcome.TRANSFER_FAILED, e)
        except Exception as e:
            return self.fail(result, SweepOutcome.TRANSFER_FAILED, e)

        logger.info(
            "SWEEP_CYCLE :: Sent | Wallet: %s | Amount: %s | From: %s | To: %s | TxHash: %s",
            account.walletAddress, transferAmount, account.depositWalletAddress, masterAddress,
            result.transactionReference
        )

        try:
            postSweepObserved = self.context.balanceService.query(account.depositWalletAddress)
        except Exception as e:
            return self.fail(result, SweepOutcome.BALANCE_QUERY_FAILED, e)
        result.postSweepObserved = postSweepObserved

        balances = ReconciliationService.reconcile(account.confirmedBalance, preSweepPending, postSweepObserved)
        if balances.depositDetected:
            result.detectedDeposit = balances.detectedDeposit
            logger.info(
                "SWEEP_CYCLE :: Deposit arrived during sweep | Wallet: %s | Amount: %s",
                account.walletAddress, balances.detectedDeposit
            )
        account.applyBalances(balances.depositPendingBalance, balances.confirmedBalance)

        try:
            self.persistBalances(account)
        except PersistenceError as e:
            return self.fail(result, SweepOutcome.PERSISTENCE_FAILED, e)

        logger.info(
            "SWEEP_CYCLE :: SUCCESS | Wallet: %s | Pending: %s | Confirmed: %s",
            account.walletAddress, account.depositPendingBalance, account.confirmedBalance
        )
        return result

    def persistBalances(self, account: Account) -> None:
        try:
            persisted = self.context.accountStore.update(account)
        except Exception as e:
            raise PersistenceError(str(e)) from e

        if not persisted:
            raise PersistenceError("Couldn't update account with new balance")

    def fail(self, result: AccountSweepResult, outcome: SweepOutcome, error: Exception) -> AccountSweepResult:
        result.outcome = outcome
        result.errorMessage = str(error)

        # Unexpected exception types get a traceback
        logger.error(
            "SWEEP_CYCLE :: FAILED | Wallet: %s | Outcome: %s | TxHash: %s | Error: %s | Type: %s",
            result.walletAddress, outcome.value, result.transactionReference, str(error), type(error).__name__,
            exc_info=not isinstance(error, SweepError)
        )
        return result

    def recordResult(self, report: SweepCycleReport, result: AccountSweepResult) -> None:
        report.addResult(result)
        SweepMetrics.recordOutcome(result.outcome)
        if result.outcome.fundsMoved():
            SweepMetrics.recordSwept(result.transferAmount)
        if result.detectedDeposit > 0:
            SweepMetrics.recordDepositDuringSweep()
