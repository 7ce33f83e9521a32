"""
Sync Metrics - Rolling block history and derived sync speed, ETA and progress.

Speed is estimated from the oldest and newest sample in a bounded window:
    sync_speed = (newest.block - oldest.block) / elapsed_minutes

The window size (max_history_entries) trades smoothing for responsiveness.
"""

from datetime import datetime, timedelta

from .models import SubgraphInfo, Sample, UNKNOWN_BLOCK


def record_sample(subgraph: SubgraphInfo, new_block: int, now: datetime) -> None:
    """
    Append a sample to the subgraph's history window.

    The history deque is bounded, so the oldest sample is evicted once the
    window is full.

    Args:
        subgraph: Subgraph to update
        new_block: Indexed block just fetched
        now: Observation time
    """
    subgraph.history.append(Sample(new_block, now))
    subgraph.current_block = subgraph.history[-1].block


def calculate_sync_speed(subgraph: SubgraphInfo):
    """
    Blocks per minute between the oldest and newest sample.

    Returns:
        Speed in blocks/minute, or None if the window has fewer than two
        samples or no elapsed time
    """
    if len(subgraph.history) < 2:
        return None

    first = subgraph.history[0]
    last = subgraph.history[-1]

    block_diff = last.block - first.block
    time_diff_minutes = (last.timestamp - first.timestamp).total_seconds() / 60

    if time_diff_minutes <= 0:
        return None

    return block_diff / time_diff_minutes


def compute_metrics(subgraph: SubgraphInfo, latest_chain_block: int) -> None:
    """
    Derive blocks behind, sync speed and ETA after a successful fetch.

    Blocks behind is not clamped: a subgraph read after the chain head can be
    briefly ahead. Speed and ETA keep their previous values when the window
    cannot produce a new speed, and ETA is only refreshed for positive speed.

    Args:
        subgraph: Subgraph with a freshly recorded sample
        latest_chain_block: Chain head block for this cycle
    """
    subgraph.last_block = latest_chain_block
    subgraph.blocks_behind = latest_chain_block - subgraph.current_block

    speed = calculate_sync_speed(subgraph)
    if speed is None:
        return

    subgraph.sync_speed = speed
    if speed > 0:
        eta_minutes = subgraph.blocks_behind / speed
        subgraph.estimated_time_left = timedelta(minutes=eta_minutes)


def mark_fetch_failed(subgraph: SubgraphInfo, latest_chain_block: int) -> None:
    """
    Reset display fields after a failed subgraph fetch.

    History is left untouched so the next successful sample still has the
    earlier readings to compare against.
    """
    subgraph.current_block = UNKNOWN_BLOCK
    subgraph.last_block = latest_chain_block
    subgraph.blocks_behind = latest_chain_block - subgraph.start_block
    subgraph.sync_speed = 0.0
    subgraph.estimated_time_left = timedelta(0)


def progress_percentage(subgraph: SubgraphInfo) -> float:
    """
    Share of the range start_block..last_block the subgraph has indexed.

    Returns:
        Percentage (0-100, may transiently exceed 100 when the chain reading
        is older than the subgraph reading)
    """
    if (subgraph.current_block == UNKNOWN_BLOCK
            or not subgraph.start_block
            or subgraph.last_block <= subgraph.start_block):
        return 0.0

    indexed = subgraph.current_block - subgraph.start_block
    total = subgraph.last_block - subgraph.start_block
    return indexed / total * 100
