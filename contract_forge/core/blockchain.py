"""
Blockchain interaction utilities.
"""
import logging
from dataclasses import dataclass
from typing import Optional

from eth_account import Account
from web3 import Web3

logger = logging.getLogger(__name__)

# Plain value transfer
TRANSFER_GAS = 21000


@dataclass
class TransferResult:
    sender: str
    tx_hash: str
    block_number: Optional[int]


def get_web3(rpc_url: str) -> Web3:
    """Get Web3 instance connected to the node."""
    w3 = Web3(Web3.HTTPProvider(rpc_url))

    if not w3.is_connected():
        raise ConnectionError(f"Could not connect to {rpc_url}")

    return w3


def get_signer(w3: Web3, private_key: Optional[str] = None):
    """
    Get the signing identity.

    Returns (address, account). account is a local eth_account signer when a
    private key is given, otherwise None and address is the node's first
    managed account.
    """
    if private_key:
        account = Account.from_key(private_key)
        return account.address, account

    accounts = w3.eth.accounts
    if not accounts:
        raise ValueError("No signer available: set DEPLOYER_PRIVATE_KEY or use a node with unlocked accounts")
    return accounts[0], None


def send_self_transfer(
    w3: Web3,
    amount_eth: str,
    private_key: Optional[str] = None,
    receipt_timeout: float = 120.0,
) -> TransferResult:
    """Send amount_eth from the signer back to itself and wait for the receipt."""
    address, account = get_signer(w3, private_key)
    logger.info(f"Sending transaction from: {address}")

    value = Web3.to_wei(amount_eth, "ether")

    if account is not None:
        tx = {
            "from": address,
            "to": address,
            "value": value,
            "nonce": w3.eth.get_transaction_count(address),
            "gas": TRANSFER_GAS,
            "gasPrice": w3.eth.gas_price,
            "chainId": w3.eth.chain_id,
        }
        signed_txn = account.sign_transaction(tx)
        tx_hash = w3.eth.send_raw_transaction(signed_txn.raw_transaction)
    else:
        tx_hash = w3.eth.send_transaction({"from": address, "to": address, "value": value})

    tx_hash_hex = Web3.to_hex(tx_hash)
    logger.info(f"Transaction sent! Hash: {tx_hash_hex}")

    receipt = w3.eth.wait_for_transaction_receipt(tx_hash, timeout=receipt_timeout)
    block_number = receipt["blockNumber"] if receipt else None

    return TransferResult(sender=address, tx_hash=tx_hash_hex, block_number=block_number)
