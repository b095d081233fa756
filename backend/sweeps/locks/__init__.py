from .WalletLockTable import WalletLockTable, sharedWalletLocks

__all__ = [
    'WalletLockTable',
    'sharedWalletLocks',
]
