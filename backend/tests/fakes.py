"""
In-memory collaborators for sweep engine tests.
"""
import threading
import time
from dataclasses import dataclass, replace
from decimal import Decimal
from typing import Callable, Dict, List, Optional, Set

from sweeps.exceptions import (
    AccountStoreUnavailableError,
    CredentialError,
    MasterWalletUnavailableError,
    QueryError,
    TransferError,
    TransferUnconfirmedError,
)
from sweeps.interfaces import (
    AccountStore,
    BalanceService,
    CredentialLoader,
    MasterWalletResolver,
    TransferService,
)
from sweeps.pojos.Account import Account

MASTER_ADDRESS = "0xmaster"


def makeAccount(name: str, pending, confirmed='0', accountId: Optional[int] = None) -> Account:
    return Account(
        walletAddress=f"0xwallet{name}",
        depositWalletAddress=f"0xdeposit{name}",
        depositWalletCredential=f"secret-{name}",
        depositPendingBalance=Decimal(str(pending)),
        confirmedBalance=Decimal(str(confirmed)),
        accountId=accountId,
    )


@dataclass
class FakeCredential:
    address: str


class InMemoryAccountStore(AccountStore):

    def __init__(self, accounts: Optional[List[Account]] = None):
        self.accounts = list(accounts or [])
        self.unavailable = False
        self.returnNone = False
        self.updateResult = True
        self.updateError: Optional[Exception] = None
        self.listDelaySeconds = 0.0
        self.reloadError: Optional[Exception] = None
        self.listCalls = 0
        self.updates: List[tuple] = []
        self._lock = threading.Lock()

    def add(self, *accounts: Account) -> None:
        self.accounts.extend(accounts)

    def listAll(self):
        with self._lock:
            self.listCalls += 1
        if self.listDelaySeconds:
            time.sleep(self.listDelaySeconds)
        if self.unavailable:
            raise AccountStoreUnavailableError("store offline")
        if self.returnNone:
            return None
        # Detached snapshots, like rows read from a database
        return [replace(account) for account in self.accounts]

    def reload(self, account: Account) -> Optional[Account]:
        if self.reloadError is not None:
            raise self.reloadError
        for stored in self.accounts:
            if stored.walletAddress == account.walletAddress:
                return stored
        return None

    def remove(self, walletAddress: str) -> None:
        self.accounts = [a for a in self.accounts if a.walletAddress != walletAddress]

    def update(self, account: Account) -> bool:
        if self.updateError is not None:
            raise self.updateError
        if self.updateResult:
            self.updates.append((account.walletAddress, account.depositPendingBalance, account.confirmedBalance))
        return self.updateResult

    def updatesFor(self, walletAddress: str) -> List[tuple]:
        return [u for u in self.updates if u[0] == walletAddress]


class FakeMasterWalletResolver(MasterWalletResolver):

    def __init__(self, address: str = MASTER_ADDRESS):
        self.address = address
        self.unavailable = False
        self.returnNone = False

    def resolve(self):
        if self.unavailable:
            raise MasterWalletUnavailableError("Master wallet is null")
        if self.returnNone:
            return None
        return FakeCredential(address=self.address)


class FakeCredentialLoader(CredentialLoader):

    def __init__(self, failFor: Optional[Set[str]] = None):
        self.failFor = failFor or set()

    def load(self, secret: str) -> FakeCredential:
        if secret in self.failFor:
            raise CredentialError("Invalid deposit wallet key")
        return FakeCredential(address=f"0xdeposit{secret[len('secret-'):]}")


class FakeChain(TransferService, BalanceService):
    """
    Records transfers and serves post-sweep balances.
    Balances default to zero after a sweep unless set in postSweepBalances.
    """

    def __init__(self):
        self.postSweepBalances: Dict[str, Decimal] = {}
        self.failTransfersFrom: Set[str] = set()
        self.unconfirmedTransfersFrom: Set[str] = set()
        self.failQueriesFor: Set[str] = set()
        self.onSend: Optional[Callable[[FakeCredential, str, Decimal], None]] = None
        self.sent: List[tuple] = []
        self.queries: List[str] = []

    def send(self, fromCredential, toAddress: str, amount: Decimal) -> str:
        if self.onSend is not None:
            self.onSend(fromCredential, toAddress, amount)
        if fromCredential.address in self.failTransfersFrom:
            raise TransferError(f"Couldn't send funds from {fromCredential.address}")
        self.sent.append((fromCredential.address, toAddress, amount))
        txHash = f"0xtx{len(self.sent)}"
        if fromCredential.address in self.unconfirmedTransfersFrom:
            raise TransferUnconfirmedError(f"Transaction {txHash} not mined within 1s", txHash=txHash)
        return txHash

    def query(self, address: str) -> Decimal:
        self.queries.append(address)
        if address in self.failQueriesFor:
            raise QueryError(f"Couldn't read balance of {address}")
        return self.postSweepBalances.get(address, Decimal('0'))

    def sentFrom(self, address: str) -> List[tuple]:
        return [s for s in self.sent if s[0] == address]


def waitFor(condition: Callable[[], bool], timeout: float = 5.0, interval: float = 0.01) -> bool:
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if condition():
            return True
        time.sleep(interval)
    return condition()
