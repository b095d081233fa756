"""
Constants for the web3 sweep collaborators.
"""

# Native coin transfer
NATIVE_TRANSFER_GAS_LIMIT = 21000

# Ledger unit for balances and amounts
LEDGER_UNIT = 'ether'

# Receipt status for a successful transaction
RECEIPT_STATUS_SUCCESS = 1

SESSION_KEY_PREFIX = "rpc"
