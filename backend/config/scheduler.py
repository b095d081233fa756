"""
Centralized sweep scheduler instance management.
Ensures EXACTLY ONE sweep scheduler exists in the process.
"""
import logging
from threading import Lock
from typing import Optional

from framework.HTTPSessionManager import HTTPSessionManager
from sweeps.schedulers.SweepScheduler import SweepScheduler

logger = logging.getLogger(__name__)

# Global scheduler instance
_sweepScheduler: Optional[SweepScheduler] = None
_sweepSchedulerLock = Lock()


def getSweepScheduler() -> SweepScheduler:
    """
    Get the process sweep scheduler, building it on first call.
    Does not start it.
    """
    global _sweepScheduler

    if _sweepScheduler is None:
        with _sweepSchedulerLock:
            # Double-checked locking pattern
            if _sweepScheduler is None:
                _sweepScheduler = _createSweepScheduler()
                logger.info("SWEEP_SCHEDULER :: Created process sweep scheduler")

    return _sweepScheduler


def _createSweepScheduler() -> SweepScheduler:
    from sweeps.SweepEngineFactory import buildSweepScheduler

    try:
        return buildSweepScheduler()
    except Exception as e:
        logger.error(
            f"SWEEP_SCHEDULER :: Failed to create scheduler | Error: {e} | Type: {type(e).__name__}",
            exc_info=True
        )
        raise


def startSweepScheduler() -> SweepScheduler:
    """Start the process sweep scheduler (no-op if already running)."""
    scheduler = getSweepScheduler()
    scheduler.start()
    return scheduler


def isSweepSchedulerRunning() -> bool:
    """Check if the sweep scheduler loop is active"""
    return _sweepScheduler is not None and _sweepScheduler.isRunning()


def shutdownSweepScheduler(wait: bool = True) -> None:
    """Graceful shutdown: no new cycle starts, an in-flight cycle finishes."""
    global _sweepScheduler

    with _sweepSchedulerLock:
        scheduler = _sweepScheduler
        _sweepScheduler = None

    if scheduler is not None:
        scheduler.stop(wait=wait)
        if wait:
            HTTPSessionManager.closeAll()
        logger.info("SWEEP_SCHEDULER :: Shutdown completed")
