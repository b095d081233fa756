"""
Builds the sweep engine for a Django process.
The only module that knows which concrete collaborators are in use.
"""
import logging

from django.db import close_old_connections

from accounts.handlers.AccountPersistenceHandler import AccountPersistenceHandler
from sweeps.SweepContext import SweepContext
from sweeps.implementations.web3.SettingsMasterWalletResolver import SettingsMasterWalletResolver
from sweeps.implementations.web3.Web3Service import Web3Service
from sweeps.locks.WalletLockTable import sharedWalletLocks
from sweeps.pojos.SweepConfig import SweepConfig
from sweeps.schedulers.SweepScheduler import SweepScheduler

logger = logging.getLogger(__name__)


def buildSweepContext() -> SweepContext:
    config = SweepConfig.fromSettings()
    web3Service = Web3Service()

    logger.info(
        "SWEEP_FACTORY :: Context built | Threshold: %s | Fee: %s | Interval: %.0fs",
        config.collectThreshold, config.transferFee, config.cycleIntervalSeconds
    )

    return SweepContext(
        config=config,
        accountStore=AccountPersistenceHandler(),
        masterWalletResolver=SettingsMasterWalletResolver(),
        credentialLoader=web3Service,
        transferService=web3Service,
        balanceService=web3Service,
        walletLocks=sharedWalletLocks,
    )


def buildSweepScheduler() -> SweepScheduler:
    # The worker thread owns its own DB connection; drop it between cycles
    return SweepScheduler(buildSweepContext(), afterCycle=close_old_connections)
