"""
Send a small self-transfer through the configured Ethereum node.
"""
import logging
import sys

from .core.blockchain import get_web3, send_self_transfer
from .core.config import settings

logger = logging.getLogger(__name__)


def run() -> int:
    w3 = get_web3(settings.RPC_URL)
    result = send_self_transfer(
        w3,
        settings.TRANSFER_AMOUNT_ETH,
        private_key=settings.DEPLOYER_PRIVATE_KEY,
        receipt_timeout=settings.RECEIPT_TIMEOUT_SECONDS,
    )

    if result.block_number is not None:
        logger.info(f"✅ Transaction mined in block: {result.block_number}")
    else:
        logger.warning("❌ Transaction receipt is null.")
    return 0


def main():
    logging.basicConfig(level=logging.INFO)
    try:
        exit_code = run()
    except Exception as e:
        logger.error(f"Transfer failed: {e}", exc_info=True)
        exit_code = 1
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
