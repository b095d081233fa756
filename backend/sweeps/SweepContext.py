"""
Explicit wiring for the sweep engine.
Built once by the host process and passed to SweepScheduler and CollectionCycle.
"""
from dataclasses import dataclass, field

from sweeps.interfaces import (
    AccountStore,
    BalanceService,
    CredentialLoader,
    MasterWalletResolver,
    TransferService,
)
from sweeps.locks.WalletLockTable import WalletLockTable, sharedWalletLocks
from sweeps.pojos.SweepConfig import SweepConfig


@dataclass
class SweepContext:
    config: SweepConfig
    accountStore: AccountStore
    masterWalletResolver: MasterWalletResolver
    credentialLoader: CredentialLoader
    transferService: TransferService
    balanceService: BalanceService
    walletLocks: WalletLockTable = field(default_factory=lambda: sharedWalletLocks)
