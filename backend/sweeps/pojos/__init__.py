"""
POJOs (dataclasses) used by the sweep engine.
"""

from .Account import Account
from .SweepConfig import SweepConfig
from .SweepDecision import SweepDecision
from .ReconciledBalances import ReconciledBalances
from .SweepCycleReport import AccountSweepResult, SweepCycleReport

__all__ = [
    'Account',
    'SweepConfig',
    'SweepDecision',
    'ReconciledBalances',
    'AccountSweepResult',
    'SweepCycleReport',
]
