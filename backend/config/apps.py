"""
Config app - SINGLE sweep engine initialization point.

The engine is started for the long-running server process only:
- skipped during migrations (schema may be changing under the store)
- skipped during tests and one-off management commands
- skipped in the autoreloader parent process
- skipped when SWEEP_ENGINE_ENABLED is false

The first cycle runs one full interval after start, so the database does not
need to be reachable at startup. Shutdown is registered with atexit: no new
cycle starts, and a cycle in flight is allowed to finish.
"""
import atexit
import logging
import os
import sys
from django.apps import AppConfig
from django.conf import settings

logger = logging.getLogger(__name__)

# Flag to prevent double initialization if ready() runs more than once
_engine_initialized = False

# Commands that trigger database migrations
MIGRATION_COMMANDS = ['migrate', 'makemigrations', 'showmigrations', 'sqlmigrate']

# Management commands that are allowed to start the engine from ready()
ALLOWED_MANAGEMENT_COMMANDS = ['runserver']


def _isMainProcess() -> bool:
    """
    Django's auto-reloader runs code twice; the actual server process has
    RUN_MAIN='true'. Without the reloader (--noreload) RUN_MAIN is unset.
    """
    if '--noreload' in sys.argv:
        return True
    return os.environ.get('RUN_MAIN') == 'true'


def _isMigrationCommand() -> bool:
    return any(cmd in sys.argv for cmd in MIGRATION_COMMANDS)


def _isTesting() -> bool:
    """Returns True if running tests"""
    return 'test' in sys.argv or 'pytest' in sys.modules


def _isAllowedManagementCommand() -> bool:
    if 'manage.py' not in sys.argv[0] or len(sys.argv) < 2:
        return False

    command = sys.argv[1]
    return command in ALLOWED_MANAGEMENT_COMMANDS


def _shouldSkipInitialization() -> bool:
    """Returns True if the sweep engine must not be started from ready()."""
    if not settings.SWEEP_ENGINE_ENABLED:
        logger.info("CONFIG_APP :: Skipping sweep engine initialization (disabled)")
        return True

    if _isMigrationCommand():
        logger.info("CONFIG_APP :: Skipping sweep engine initialization (migration command)")
        return True

    if _isTesting():
        logger.info("CONFIG_APP :: Skipping sweep engine initialization (testing)")
        return True

    if not _isAllowedManagementCommand():
        if len(sys.argv) > 1:
            logger.info(f"CONFIG_APP :: Skipping sweep engine initialization (command: {sys.argv[1]})")
        return True

    return False


class ConfigConfig(AppConfig):
    """
    Config app configuration.
    The ONLY place that starts the sweep engine for a server process.
    """
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'config'

    def ready(self):
        global _engine_initialized

        if _shouldSkipInitialization():
            return

        if not _isMainProcess():
            logger.info("CONFIG_APP :: Skipping sweep engine initialization (not main process)")
            return

        if _engine_initialized:
            logger.info("CONFIG_APP :: Sweep engine already initialized, skipping")
            return

        try:
            from config.scheduler import startSweepScheduler, shutdownSweepScheduler

            startSweepScheduler()
            atexit.register(shutdownSweepScheduler)
            _engine_initialized = True
            logger.info("CONFIG_APP :: Sweep engine started")

        except Exception as e:
            logger.error(
                "CONFIG_APP :: Sweep engine initialization failed | Error: %s",
                str(e),
                exc_info=True
            )
            raise
