import signal
import threading

from django.core.management.base import BaseCommand

from config.scheduler import startSweepScheduler, shutdownSweepScheduler


class Command(BaseCommand):
    help = 'Run the sweep engine in the foreground until interrupted'

    def handle(self, *args, **options):
        stopRequested = threading.Event()

        def _requestStop(signum, frame):
            stopRequested.set()

        signal.signal(signal.SIGTERM, _requestStop)
        signal.signal(signal.SIGINT, _requestStop)

        scheduler = startSweepScheduler()
        self.stdout.write(self.style.SUCCESS(
            f'✓ Sweep engine started | Interval: {scheduler.context.config.cycleIntervalSeconds:.0f}s'
        ))

        stopRequested.wait()

        self.stdout.write('Stopping sweep engine, waiting for in-flight cycle...')
        shutdownSweepScheduler(wait=True)
        self.stdout.write(self.style.SUCCESS(f'✓ Stopped after {scheduler.completedCycles} cycles'))
