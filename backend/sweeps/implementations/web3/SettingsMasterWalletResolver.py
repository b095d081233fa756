"""
Resolves the master wallet from SWEEP_MASTER_WALLET_PRIVATE_KEY.
"""
import logging

from eth_account import Account as EthAccount
from eth_account.signers.local import LocalAccount
from django.conf import settings

from sweeps.exceptions import MasterWalletUnavailableError
from sweeps.interfaces import MasterWalletResolver

logger = logging.getLogger(__name__)


class SettingsMasterWalletResolver(MasterWalletResolver):

    def resolve(self) -> LocalAccount:
        privateKey = getattr(settings, 'SWEEP_MASTER_WALLET_PRIVATE_KEY', None)
        if not privateKey:
            raise MasterWalletUnavailableError("Master wallet is null")

        try:
            masterWallet = EthAccount.from_key(privateKey)
        except (ValueError, TypeError) as e:
            raise MasterWalletUnavailableError(f"Invalid master wallet key: {type(e).__name__}") from e

        logger.debug("MASTER_WALLET :: Resolved | Address: %s", masterWallet.address)
        return masterWallet
