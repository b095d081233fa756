from .SweepOutcome import SweepOutcome
from .SchedulerState import SchedulerState

__all__ = [
    'SweepOutcome',
    'SchedulerState',
]
