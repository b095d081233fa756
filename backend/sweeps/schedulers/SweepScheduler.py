"""
Sweep Scheduler - fixed-delay loop around CollectionCycle.

The worker thread waits one interval, runs a cycle, and waits again, so the
delay is measured from the end of each cycle and cycles never overlap. The
stop signal is checked before every cycle; a cycle in flight always runs to
completion.
"""
import logging
import threading
from typing import Callable, Optional

from sweeps.Constants import SCHEDULER_THREAD_NAME
from sweeps.SweepContext import SweepContext
from sweeps.SweepMetrics import SweepMetrics
from sweeps.enums.SchedulerState import SchedulerState
from sweeps.pojos.SweepCycleReport import SweepCycleReport
from sweeps.schedulers.CollectionCycle import CollectionCycle

logger = logging.getLogger(__name__)


class SweepScheduler:

    def __init__(self, context: SweepContext, afterCycle: Optional[Callable[[], None]] = None):
        self.context = context
        self.collectionCycle = CollectionCycle(context)
        self.afterCycle = afterCycle

        self._lifecycleLock = threading.Lock()
        self._stopEvent: Optional[threading.Event] = None
        self._thread: Optional[threading.Thread] = None
        self._state = SchedulerState.IDLE
        self._completedCycles = 0
        self._lastReport: Optional[SweepCycleReport] = None

    @property
    def state(self) -> SchedulerState:
        return self._state

    @property
    def completedCycles(self) -> int:
        return self._completedCycles

    @property
    def lastReport(self) -> Optional[SweepCycleReport]:
        return self._lastReport

    def isRunning(self) -> bool:
        return self._thread is not None and self._thread.is_alive() and not self._stopEvent.is_set()

    def start(self) -> None:
        """Arm the loop; the first cycle runs after one full interval."""
        with self._lifecycleLock:
            if self.isRunning():
                logger.info("SWEEP_SCHEDULER :: Already running, start ignored")
                return

            # A previous loop may still be finishing its last cycle
            previousThread = self._thread
            if previousThread is not None and previousThread.is_alive():
                logger.info("SWEEP_SCHEDULER :: Waiting for previous loop to finish")
                previousThread.join()

            interval = self.context.config.cycleIntervalSeconds
            logger.info("SWEEP_SCHEDULER :: Starting | Interval: %.0fs", interval)

            self._stopEvent = threading.Event()
            self._state = SchedulerState.SCHEDULED
            self._thread = threading.Thread(
                target=self._loop,
                args=(self._stopEvent,),
                name=SCHEDULER_THREAD_NAME,
                daemon=True
            )
            self._thread.start()
            SweepMetrics.setSchedulerRunning(True)

    def stop(self, wait: bool = True, timeout: Optional[float] = None) -> None:
        """
        Prevent any further cycle from starting.

        Args:
            wait: block until an in-flight cycle has finished
            timeout: maximum seconds to wait (None waits indefinitely)
        """
        with self._lifecycleLock:
            if self._stopEvent is None:
                logger.info("SWEEP_SCHEDULER :: Not started, stop ignored")
                return

            thread = self._thread
            if self._stopEvent.is_set():
                # Already signalled; a waiting caller still joins the last cycle
                if not wait or thread is None or not thread.is_alive():
                    logger.info("SWEEP_SCHEDULER :: Not running, stop ignored")
                    return
            else:
                logger.info("SWEEP_SCHEDULER :: Stopping")
                self._stopEvent.set()
                if thread is None or not thread.is_alive():
                    self._state = SchedulerState.STOPPED
                SweepMetrics.setSchedulerRunning(False)

        if wait and thread is not None and thread is not threading.current_thread():
            thread.join(timeout)
            if thread.is_alive():
                logger.warning("SWEEP_SCHEDULER :: Cycle still in flight after %.0fs", timeout)
            else:
                logger.info("SWEEP_SCHEDULER :: Stopped")

    def runOnce(self) -> Optional[SweepCycleReport]:
        """Execute a single cycle synchronously on the calling thread."""
        return self._executeCycle()

    def _loop(self, stopEvent: threading.Event) -> None:
        interval = self.context.config.cycleIntervalSeconds

        # Event.wait returns True once stop() is called
        while not stopEvent.wait(interval):
            if stopEvent.is_set():
                break

            self._state = SchedulerState.RUNNING
            self._executeCycle()

            if not stopEvent.is_set():
                self._state = SchedulerState.SCHEDULED
                logger.info("SWEEP_SCHEDULER :: Rescheduling collect cycle | Interval: %.0fs", interval)

        self._state = SchedulerState.STOPPED
        logger.info("SWEEP_SCHEDULER :: Loop exited | Completed cycles: %d", self._completedCycles)

    def _executeCycle(self) -> Optional[SweepCycleReport]:
        cycleNumber = self._completedCycles + 1
        report = None

        try:
            report = self.collectionCycle.run(cycleNumber)
            self._lastReport = report
        except Exception as e:
            SweepMetrics.recordCycleCrashed()
            logger.error(
                "SWEEP_SCHEDULER :: Cycle crashed | Cycle: %d | Error: %s | Type: %s",
                cycleNumber, str(e), type(e).__name__,
                exc_info=True
            )
        finally:
            self._completedCycles = cycleNumber
            self._runAfterCycle()

        return report

    def _runAfterCycle(self) -> None:
        if self.afterCycle is None:
            return
        try:
            self.afterCycle()
        except Exception as e:
            logger.warning("SWEEP_SCHEDULER :: After-cycle hook failed | Error: %s", str(e), exc_info=True)
