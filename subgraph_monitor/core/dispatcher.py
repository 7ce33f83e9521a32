"""
Sync Dispatcher - Runs check cycles over the watchlist.

Cycle:
1. Refresh the head block of every chain
2. Group subgraphs by chain
3. For each chain with a known head block, refresh its subgraphs and print
   the chain's section

The scheduler runs one cycle immediately and then one per interval.
"""

import logging
import time
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional

from ..config.settings import CHECK_INTERVAL_MINUTES
from ..fetchers.chain import fetch_latest_block
from ..fetchers.subgraph import fetch_current_block
from ..reporting.console import print_chain_report
from .errors import MonitorError
from .metrics import record_sample, compute_metrics, mark_fetch_failed
from .models import ChainInfo, SubgraphInfo
from .registry import WatchlistRegistry, group_subgraphs_by_chain

logger = logging.getLogger(__name__)


def update_chain_blocks(chains: Dict[str, ChainInfo]) -> List[str]:
    """
    Refresh latest_block for every chain.

    A failed chain keeps its previous latest_block.

    Returns:
        List of error messages
    """
    errors = []
    for chain_id, chain in chains.items():
        try:
            block = fetch_latest_block(chain.rpc_url)
        except MonitorError as e:
            logger.error("Chain %s error: %s", chain_id, e)
            errors.append(f"chain {chain_id}: {e}")
            continue
        chain.latest_block = block
        logger.info("Chain %s latest block: %d", chain_id, block)
    return errors


def process_subgraph(subgraph: SubgraphInfo, latest_block: int,
                     clock: Callable[[], datetime] = datetime.now) -> Optional[str]:
    """
    Fetch a subgraph's indexed block and update its metrics.

    Returns:
        Error message if the fetch failed, else None
    """
    try:
        current = fetch_current_block(subgraph.url)
    except MonitorError as e:
        logger.error("Error %s: %s", subgraph.name, e)
        mark_fetch_failed(subgraph, latest_block)
        return f"subgraph {subgraph.name}: {e}"

    record_sample(subgraph, current, clock())
    compute_metrics(subgraph, latest_block)
    return None


def process_chain_subgraphs(chain: ChainInfo, subgraphs: List[SubgraphInfo],
                            clock: Callable[[], datetime] = datetime.now) -> Dict[str, Any]:
    """
    Refresh every subgraph of a chain and print the chain's section.

    Skipped entirely while the chain head block is unknown (0).

    Returns:
        Dict with reported flag, processed count and errors
    """
    result = {
        "reported": False,
        "subgraphs_processed": 0,
        "errors": []
    }

    if chain.latest_block == 0:
        logger.warning("Skipping %s subgraphs, latest block = 0", chain.name)
        return result

    for sg in subgraphs:
        error = process_subgraph(sg, chain.latest_block, clock)
        result["subgraphs_processed"] += 1
        if error:
            result["errors"].append(error)

    result["reported"] = print_chain_report(chain, subgraphs, clock())
    return result


def dispatch_sync_check(registry: WatchlistRegistry,
                        clock: Callable[[], datetime] = datetime.now) -> Dict[str, Any]:
    """
    Run one full check cycle.

    Args:
        registry: Watchlist whose chain and subgraph state is updated in place
        clock: Source of observation timestamps

    Returns:
        Dict with cycle results
    """
    start = time.monotonic()
    result = {
        "timestamp": clock().isoformat(),
        "chains_checked": len(registry.chains),
        "chains_reported": 0,
        "subgraphs_processed": 0,
        "subgraphs_failed": 0,
        "errors": []
    }

    result["errors"].extend(update_chain_blocks(registry.chains))

    for chain_id, subgraphs in group_subgraphs_by_chain(registry.subgraphs).items():
        chain = registry.get_chain(chain_id)
        if chain is None:
            logger.warning("No chain info for %s", chain_id)
            continue

        try:
            chain_result = process_chain_subgraphs(chain, subgraphs, clock)
        except Exception as e:
            logger.exception("Unexpected error processing chain %s", chain_id)
            result["errors"].append(f"chain {chain_id}: {e}")
            continue

        result["subgraphs_processed"] += chain_result["subgraphs_processed"]
        result["subgraphs_failed"] += len(chain_result["errors"])
        result["errors"].extend(chain_result["errors"])
        if chain_result["reported"]:
            result["chains_reported"] += 1

    result["duration_ms"] = (time.monotonic() - start) * 1000
    logger.info(
        "Cycle done: %d/%d chains reported, %d subgraphs (%d failed) in %.0fms",
        result["chains_reported"], result["chains_checked"],
        result["subgraphs_processed"], result["subgraphs_failed"], result["duration_ms"]
    )
    return result


def run_scheduler(registry: WatchlistRegistry,
                  interval_seconds: float = CHECK_INTERVAL_MINUTES * 60,
                  max_cycles: Optional[int] = None,
                  sleep: Callable[[float], None] = time.sleep,
                  clock: Callable[[], datetime] = datetime.now) -> int:
    """
    Run a cycle now, then one every interval_seconds.

    Cycles are scheduled on a fixed cadence from the first run; a cycle that
    overruns the interval is followed immediately by the next one.

    Args:
        registry: Watchlist state shared across cycles
        interval_seconds: Time between cycle starts
        max_cycles: Stop after this many cycles (None runs forever)
        sleep: Sleep function
        clock: Source of observation timestamps

    Returns:
        Number of cycles run
    """
    cycles = 0
    next_run = time.monotonic()

    while max_cycles is None or cycles < max_cycles:
        try:
            dispatch_sync_check(registry, clock)
        except Exception:
            logger.exception("Check cycle %d failed outside chain processing", cycles + 1)
        cycles += 1

        if max_cycles is not None and cycles >= max_cycles:
            break

        next_run += interval_seconds
        sleep(max(0.0, next_run - time.monotonic()))

    return cycles
