"""Block height helpers for log queries."""

import logging

from web3 import AsyncWeb3

logger = logging.getLogger(__name__)


async def get_logs_query_start_height(provider: AsyncWeb3, delta: int) -> int:
    """Get the block to start a log query ``delta`` blocks behind the tip.

    Never returns less than 0. Provider errors are not retried.

    Args:
        provider: Connected web3 instance
        delta: Number of blocks to look back

    Returns:
        Start block height
    """
    if delta < 0:
        raise ValueError(f"delta must not be negative, got {delta}")

    block_height = await provider.eth.block_number
    start = max(block_height - delta, 0)

    logger.debug(f"Logs query start height: {start} (tip {block_height}, delta {delta})")
    return start
