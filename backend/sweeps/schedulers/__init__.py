"""
Sweep engine schedulers.

Architecture:
- SweepScheduler: fixed-delay loop owning the cycle lifecycle
- CollectionCycle: one pass over all accounts
"""
from sweeps.schedulers.CollectionCycle import CollectionCycle
from sweeps.schedulers.SweepScheduler import SweepScheduler

__all__ = [
    'CollectionCycle',
    'SweepScheduler',
]
