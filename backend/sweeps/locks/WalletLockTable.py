"""
Per-wallet exclusive access guards.

Every code path that moves funds for a wallet (sweeps, manual withdrawals)
must enter the wallet's guard from the same table. sharedWalletLocks is the
process-wide table used unless a caller supplies its own.
"""
import logging
import threading
from contextlib import contextmanager
from typing import Dict, Iterator

logger = logging.getLogger(__name__)


class WalletLockTable:

    def __init__(self):
        self._locks: Dict[str, threading.RLock] = {}
        self._tableLock = threading.Lock()

    @staticmethod
    def normalizeKey(walletAddress: str) -> str:
        """Checksummed and lower-case spellings of an address share one guard."""
        return walletAddress.strip().lower()

    def getLock(self, walletAddress: str) -> threading.RLock:
        """Get or create the guard for a wallet (atomic)."""
        key = self.normalizeKey(walletAddress)

        with self._tableLock:
            lock = self._locks.get(key)
            if lock is None:
                lock = threading.RLock()
                self._locks[key] = lock
                logger.debug("WALLET_LOCKS :: Created guard | Wallet: %s | Total: %d", key, len(self._locks))
            return lock

    @contextmanager
    def acquire(self, walletAddress: str) -> Iterator[threading.RLock]:
        """Hold the wallet's guard for the duration of the with-block."""
        lock = self.getLock(walletAddress)
        with lock:
            yield lock

    def size(self) -> int:
        with self._tableLock:
            return len(self._locks)

    def __contains__(self, walletAddress: str) -> bool:
        with self._tableLock:
            return self.normalizeKey(walletAddress) in self._locks


sharedWalletLocks = WalletLockTable()
