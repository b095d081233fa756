"""
web3.py implementation of the sweep engine's chain collaborators.

- load: deposit wallet secret -> LocalAccount
- send: signed native coin transfer, returned only after a successful receipt
- query: deposit wallet balance in ether

send() waits for the receipt so a reverted transfer surfaces as a
TransferError, and a broadcast transfer without a receipt as a
TransferUnconfirmedError carrying its hash. Reconciliation therefore only
runs after a mined, successful transfer, and a higher post-sweep balance
can only mean a new deposit.
"""
import logging
from decimal import Decimal
from typing import Optional

from eth_account import Account as EthAccount
from eth_account.signers.local import LocalAccount
from web3 import Web3
from web3.exceptions import TimeExhausted, Web3Exception
from django.conf import settings

from framework.HTTPSessionManager import HTTPSessionManager
from sweeps.exceptions import CredentialError, QueryError, TransferError, TransferUnconfirmedError
from sweeps.interfaces import BalanceService, CredentialLoader, TransferService
from sweeps.implementations.web3.Constants import (
    LEDGER_UNIT,
    NATIVE_TRANSFER_GAS_LIMIT,
    RECEIPT_STATUS_SUCCESS,
    SESSION_KEY_PREFIX,
)

logger = logging.getLogger(__name__)


class Web3Service(TransferService, BalanceService, CredentialLoader):

    def __init__(self, w3: Optional[Web3] = None, chainId: Optional[int] = None,
                 receiptTimeoutSeconds: Optional[float] = None):
        self.w3 = w3 or self.createWeb3()
        self.chainId = chainId if chainId is not None else settings.SWEEP_CHAIN_ID
        self.receiptTimeoutSeconds = (
            receiptTimeoutSeconds if receiptTimeoutSeconds is not None else settings.SWEEP_RECEIPT_TIMEOUT_SECONDS
        )

    @staticmethod
    def createWeb3() -> Web3:
        rpcUrl = settings.SWEEP_RPC_URL
        session = HTTPSessionManager.getSession(f"{SESSION_KEY_PREFIX}:{rpcUrl}")
        provider = Web3.HTTPProvider(
            rpcUrl,
            request_kwargs={'timeout': settings.SWEEP_RPC_TIMEOUT_SECONDS},
            session=session
        )
        logger.info("WEB3_SERVICE :: Created provider | RPC: %s", rpcUrl)
        return Web3(provider)

    def load(self, secret: str) -> LocalAccount:
        if not secret:
            raise CredentialError("Deposit wallet key is empty")
        try:
            return EthAccount.from_key(secret)
        except (ValueError, TypeError) as e:
            # The underlying message never includes the key material
            raise CredentialError(f"Invalid deposit wallet key: {type(e).__name__}") from e

    def send(self, fromCredential: LocalAccount, toAddress: str, amount: Decimal) -> str:
        try:
            tx = {
                'to': Web3.to_checksum_address(toAddress),
                'value': Web3.to_wei(amount, LEDGER_UNIT),
                'gas': NATIVE_TRANSFER_GAS_LIMIT,
                'gasPrice': self.w3.eth.gas_price,
                'nonce': self.w3.eth.get_transaction_count(fromCredential.address, 'pending'),
                'chainId': self.chainId,
            }
            signed = fromCredential.sign_transaction(tx)
            txHash = Web3.to_hex(self.w3.eth.send_raw_transaction(signed.raw_transaction))
        except (Web3Exception, ValueError, OSError) as e:
            raise TransferError(f"Couldn't send funds from {fromCredential.address}: {e}") from e

        logger.info("WEB3_SERVICE :: Submitted | From: %s | To: %s | Amount: %s | TxHash: %s",
                    fromCredential.address, toAddress, amount, txHash)

        try:
            receipt = self.w3.eth.wait_for_transaction_receipt(txHash, timeout=self.receiptTimeoutSeconds)
        except TimeExhausted as e:
            raise TransferUnconfirmedError(
                f"Transaction {txHash} not mined within {self.receiptTimeoutSeconds}s", txHash=txHash
            ) from e
        except (Web3Exception, ValueError, OSError) as e:
            raise TransferUnconfirmedError(f"Couldn't confirm transaction {txHash}: {e}", txHash=txHash) from e

        if receipt['status'] != RECEIPT_STATUS_SUCCESS:
            raise TransferError(f"Transaction {txHash} failed on-chain", txHash=txHash)

        return txHash

    def query(self, address: str) -> Decimal:
        try:
            balanceWei = self.w3.eth.get_balance(Web3.to_checksum_address(address))
        except (Web3Exception, ValueError, OSError) as e:
            raise QueryError(f"Couldn't read balance of {address}: {e}") from e

        return Decimal(Web3.from_wei(balanceWei, LEDGER_UNIT))
