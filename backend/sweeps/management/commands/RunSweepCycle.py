from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from sweeps.SweepEngineFactory import buildSweepScheduler


class Command(BaseCommand):
    help = (
        'Run a single sweep cycle now and print its report. Wallet guards are '
        'per process, so this refuses to run while the engine is enabled '
        'unless --force is given.'
    )

    def add_arguments(self, parser):
        parser.add_argument(
            '--force',
            action='store_true',
            help='Run even though SWEEP_ENGINE_ENABLED is set',
        )

    def handle(self, *args, **options):
        if settings.SWEEP_ENGINE_ENABLED and not options['force']:
            raise CommandError(
                'SWEEP_ENGINE_ENABLED is set; a hosted sweep loop may be running in '
                'another process and would not share its wallet guards. '
                'Disable the engine or pass --force.'
            )

        self.stdout.write('Running sweep cycle...')

        report = buildSweepScheduler().runOnce()

        if report is None:
            self.stdout.write(self.style.ERROR('✗ Cycle crashed, see logs'))
            return

        if report.aborted:
            self.stdout.write(self.style.ERROR(f'✗ Cycle aborted: {report.abortReason}'))
            return

        style = self.style.WARNING if report.hasErrors() else self.style.SUCCESS
        self.stdout.write(style('✓ Sweep cycle completed'))
        self.stdout.write(f'  Accounts: {report.totalAccounts}')
        self.stdout.write(f'  Eligible: {report.eligibleAccounts}')
        self.stdout.write(f'  Succeeded: {report.succeeded}')
        self.stdout.write(f'  Failed: {report.failed}')
        self.stdout.write(f'  Skipped: {report.skipped}')
        self.stdout.write(f'  Total swept: {report.totalSwept}')
        for result in report.unreconciledTransfers:
            self.stdout.write(self.style.ERROR(
                f'  Unreconciled: {result.walletAddress} | {result.outcome.value} | {result.transactionReference}'
            ))
        self.stdout.write(f'  Time: {report.durationSeconds:.2f}s')
