"""
Defaults for the sweep engine.
Deployment values live in config/settings.py and are read through SweepConfig.
"""
from decimal import Decimal

# Fee reserved for the sweep transaction itself (native coin)
DEFAULT_TRANSFER_FEE = Decimal('0.0005')

# Sweep once the pending balance reaches the withdraw tax
DEFAULT_WITHDRAW_TAX = Decimal('0.001')
DEFAULT_COLLECT_THRESHOLD = DEFAULT_WITHDRAW_TAX

DEFAULT_CYCLE_INTERVAL_SECONDS = 3600

# Worker thread name, visible in thread dumps and log records
SCHEDULER_THREAD_NAME = "sweep-scheduler"

# Maximum errors listed in SweepCycleReport.toDict()
REPORT_ERROR_LIMIT = 10
