"""
Centralized prometheus metrics for the sweep engine.
"""
from decimal import Decimal

from prometheus_client import Counter, Histogram, Gauge

from sweeps.enums.SweepOutcome import SweepOutcome


class SweepMetrics:
    """Centralized metrics collection for sweep cycles and account outcomes."""

    cyclesTotal = Counter(
        'sweep_cycles_total',
        'Total number of collection cycles',
        ['status']
    )

    cycleDuration = Histogram(
        'sweep_cycle_duration_seconds',
        'Collection cycle duration in seconds'
    )

    accountOutcomes = Counter(
        'sweep_account_outcomes_total',
        'Processed eligible accounts by outcome',
        ['outcome']
    )

    sweptAmount = Counter(
        'sweep_swept_amount_total',
        'Total amount transferred to the master wallet'
    )

    depositsDuringSweep = Counter(
        'sweep_deposits_during_sweep_total',
        'Deposits detected while a sweep was in flight'
    )

    # Alert on any increase: funds moved on-chain, ledger not updated
    unreconciledTransfers = Counter(
        'sweep_unreconciled_transfers_total',
        'Transfers that completed without a ledger update',
        ['outcome']
    )

    schedulerRunning = Gauge(
        'sweep_scheduler_running',
        'Whether the sweep scheduler loop is active'
    )

    @classmethod
    def recordCycleCompleted(cls, duration: float):
        cls.cyclesTotal.labels(status='completed').inc()
        cls.cycleDuration.observe(duration)

    @classmethod
    def recordCycleAborted(cls, duration: float):
        cls.cyclesTotal.labels(status='aborted').inc()
        cls.cycleDuration.observe(duration)

    @classmethod
    def recordCycleCrashed(cls):
        cls.cyclesTotal.labels(status='crashed').inc()

    @classmethod
    def recordOutcome(cls, outcome: SweepOutcome):
        cls.accountOutcomes.labels(outcome=outcome.value).inc()
        if outcome.leavesLedgerStale():
            cls.unreconciledTransfers.labels(outcome=outcome.value).inc()

    @classmethod
    def recordSwept(cls, amount: Decimal):
        cls.sweptAmount.inc(float(amount))

    @classmethod
    def recordDepositDuringSweep(cls):
        cls.depositsDuringSweep.inc()

    @classmethod
    def setSchedulerRunning(cls, running: bool):
        cls.schedulerRunning.set(1 if running else 0)
