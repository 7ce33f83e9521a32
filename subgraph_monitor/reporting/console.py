"""
Console Reporter - Prints the per-chain sync status table to stdout.

Features:
- One section per chain with a header line and column headings
- Fixed-width rows, "Error" markers for subgraphs that failed this cycle
- Human ETA strings (days / hours / minutes)
"""

from datetime import datetime
from typing import List

from ..core.metrics import progress_percentage
from ..core.models import ChainInfo, SubgraphInfo, UNKNOWN_BLOCK

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

ERROR_MARKER = "Error"


def format_eta(subgraph: SubgraphInfo) -> str:
    """
    Format the estimated time to sync.

    Returns:
        "Error" for a failed fetch, "In sync" / "Unknown" when there is no
        positive ETA, otherwise days, hours or minutes
    """
    if subgraph.current_block == UNKNOWN_BLOCK:
        return ERROR_MARKER

    eta = subgraph.estimated_time_left
    if eta.total_seconds() <= 0:
        if subgraph.blocks_behind == 0:
            return "In sync"
        return "Unknown"

    hours = eta.total_seconds() / 3600
    days = hours / 24
    if days >= 1:
        return f"{days:.1f}d"
    if hours >= 1:
        return f"{hours:.1f}h"
    return f"{eta.total_seconds() / 60:.0f}m"


def format_current_block(subgraph: SubgraphInfo) -> str:
    """Current block, or the error marker when unknown."""
    if subgraph.current_block == UNKNOWN_BLOCK:
        return ERROR_MARKER
    return str(subgraph.current_block)


def format_chain_header(chain: ChainInfo, now: datetime) -> str:
    """
    Format the section header for a chain.

    Args:
        chain: Chain being reported
        now: Report time

    Returns:
        Header line followed by the column headings
    """
    title = (f"--- {chain.name} Subgraph Sync Status "
             f"(Latest Block: {chain.latest_block}) - {now.strftime(TIMESTAMP_FORMAT)} ---")
    columns = (f"{'Subgraph':<25} {'ChainBlock':<12} {'Subgraph':<12} {'Behind':<12} "
               f"{'Sync Speed':<15} {'ETA':<15} Progress")
    return f"\n{title}\n{columns}"


def format_subgraph_row(subgraph: SubgraphInfo) -> str:
    """Format one table row for a subgraph."""
    return (f"{subgraph.name:<25} "
            f"{subgraph.last_block:<12d} "
            f"{format_current_block(subgraph):<12} "
            f"{subgraph.blocks_behind:<12d} "
            f"{subgraph.sync_speed:<15.2f} "
            f"{format_eta(subgraph):<15} "
            f"{progress_percentage(subgraph):.2f}%")


def print_chain_header(chain: ChainInfo, now: datetime) -> None:
    print(format_chain_header(chain, now))


def print_subgraph_status(subgraph: SubgraphInfo) -> None:
    print(format_subgraph_row(subgraph))


def print_chain_report(chain: ChainInfo, subgraphs: List[SubgraphInfo], now: datetime) -> bool:
    """
    Print a full section for a chain.

    Chains whose head block was never fetched (latest_block == 0) produce no
    output at all.

    Returns:
        True if the section was printed
    """
    if chain.latest_block == 0:
        return False

    print_chain_header(chain, now)
    for sg in subgraphs:
        print_subgraph_status(sg)
    return True
