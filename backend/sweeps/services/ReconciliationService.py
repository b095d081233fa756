"""
Balance reconciliation after a sweep.

The deposit wallet is re-read once the transfer is confirmed. Anything above
the pre-sweep pending balance arrived while the sweep was in flight: it is
credited to the confirmed ledger and carried forward as pending so the next
cycle collects it.
"""
from decimal import Decimal

from sweeps.pojos.ReconciledBalances import ReconciledBalances


class ReconciliationService:

    @staticmethod
    def reconcile(confirmedBalance: Decimal, preSweepPending: Decimal, postSweepObserved: Decimal) -> ReconciledBalances:
        if postSweepObserved > preSweepPending:
            delta = postSweepObserved - preSweepPending
            return ReconciledBalances(
                depositPendingBalance=postSweepObserved,
                confirmedBalance=confirmedBalance + delta,
                detectedDeposit=delta,
            )

        return ReconciledBalances(
            depositPendingBalance=postSweepObserved,
            confirmedBalance=confirmedBalance,
        )
