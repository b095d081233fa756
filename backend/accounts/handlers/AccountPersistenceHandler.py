"""
Django-backed AccountStore for the sweep engine.
"""
import logging
from typing import List, Optional

from django.db import transaction, DatabaseError
from django.utils import timezone

from accounts.models import Account as AccountModel
from sweeps.exceptions import AccountStoreUnavailableError, PersistenceError
from sweeps.interfaces import AccountStore
from sweeps.pojos.Account import Account

logger = logging.getLogger(__name__)


class AccountPersistenceHandler(AccountStore):

    def listAll(self) -> List[Account]:
        try:
            return [self.toAccount(model) for model in AccountModel.objects.all().order_by('accountsid')]
        except DatabaseError as e:
            logger.error("ACCOUNT_STORE :: Couldn't load accounts | Error: %s", str(e), exc_info=True)
            raise AccountStoreUnavailableError(f"Couldn't load accounts: {e}") from e

    def reload(self, account: Account) -> Optional[Account]:
        try:
            model = AccountModel.objects.filter(accountsid=account.accountId).first()
        except DatabaseError as e:
            logger.error(
                "ACCOUNT_STORE :: Reload failed | Wallet: %s | Error: %s",
                account.walletAddress, str(e), exc_info=True
            )
            raise PersistenceError(f"Couldn't reload account: {e}") from e

        return self.toAccount(model) if model is not None else None

    def update(self, account: Account) -> bool:
        """
        Write both balance fields in a single UPDATE.
        Only the balances are written; the deposit wallet key is never touched.
        """
        try:
            with transaction.atomic():
                updated = AccountModel.objects.filter(accountsid=account.accountId).update(
                    depositpendingbalance=account.depositPendingBalance,
                    confirmedbalance=account.confirmedBalance,
                    lastupdatedat=timezone.now(),
                )
        except DatabaseError as e:
            logger.error(
                "ACCOUNT_STORE :: Update failed | Wallet: %s | Error: %s",
                account.walletAddress, str(e), exc_info=True
            )
            return False

        if updated != 1:
            logger.error("ACCOUNT_STORE :: Account not found | Wallet: %s | Id: %s", account.walletAddress, account.accountId)
            return False

        return True

    @staticmethod
    def toAccount(model: AccountModel) -> Account:
        return Account(
            accountId=model.accountsid,
            walletAddress=model.walletaddress,
            depositWalletAddress=model.depositwalletaddress,
            depositWalletCredential=model.depositwalletprivatekey,
            depositPendingBalance=model.depositpendingbalance,
            confirmedBalance=model.confirmedbalance,
        )
