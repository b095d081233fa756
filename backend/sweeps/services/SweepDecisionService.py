"""
Eligibility and transfer amount for a single account.
"""
from sweeps.exceptions import InsufficientAfterFeeError
from sweeps.pojos.Account import Account
from sweeps.pojos.SweepConfig import SweepConfig
from sweeps.pojos.SweepDecision import SweepDecision


class SweepDecisionService:

    @staticmethod
    def evaluate(account: Account, config: SweepConfig) -> SweepDecision:
        """
        Decide whether the account's deposit wallet should be swept.

        Eligible when the pending balance reaches the collect threshold; the
        transfer amount is the pending balance minus the transfer fee.

        Raises:
            InsufficientAfterFeeError: eligible, but nothing would be left to send
        """
        pendingBalance = account.depositPendingBalance

        if pendingBalance < config.collectThreshold:
            return SweepDecision.ineligible()

        transferAmount = pendingBalance - config.transferFee
        if transferAmount <= 0:
            raise InsufficientAfterFeeError(pendingBalance, config.transferFee)

        return SweepDecision.sweep(transferAmount)
