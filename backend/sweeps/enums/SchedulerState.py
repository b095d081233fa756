from enum import Enum


class SchedulerState(Enum):
    """Lifecycle of the sweep scheduler loop."""
    IDLE = "idle"
    SCHEDULED = "scheduled"
    RUNNING = "running"
    STOPPED = "stopped"
