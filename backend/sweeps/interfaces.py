"""
Collaborator contracts consumed by the sweep engine.

Concrete implementations live outside the core (accounts app, web3 client,
settings resolver) and are passed in through SweepContext.
"""
from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Any, List, Optional

from sweeps.pojos.Account import Account


class AccountStore(ABC):

    @abstractmethod
    def listAll(self) -> Optional[List[Account]]:
        """
        Return every account.

        Raises:
            AccountStoreUnavailableError: store cannot be read (None is treated the same)
        """

    @abstractmethod
    def reload(self, account: Account) -> Optional[Account]:
        """
        Return the current stored state of account, or None if it no longer exists.

        Called under the wallet guard so the sweep decides and writes from
        balances no concurrent withdrawal can have changed.

        Raises:
            PersistenceError: the account could not be read
        """

    @abstractmethod
    def update(self, account: Account) -> bool:
        """Persist depositPendingBalance and confirmedBalance together."""


class MasterWalletResolver(ABC):

    @abstractmethod
    def resolve(self) -> Any:
        """
        Return the master wallet credential (exposes an ``address`` attribute).

        Raises:
            MasterWalletUnavailableError: no master wallet (None is treated the same)
        """


class CredentialLoader(ABC):

    @abstractmethod
    def load(self, secret: str) -> Any:
        """
        Materialize a signing credential from its stored secret.

        Raises:
            CredentialError
        """


class TransferService(ABC):

    @abstractmethod
    def send(self, fromCredential: Any, toAddress: str, amount: Decimal) -> str:
        """
        Transfer amount and return the transaction reference once confirmed.

        Raises:
            TransferError
        """


class BalanceService(ABC):

    @abstractmethod
    def query(self, address: str) -> Decimal:
        """
        Raises:
            QueryError
        """
