"""Core monitoring components."""

from .errors import (
    MonitorError,
    TransportError,
    DecodeError,
    ProtocolError,
    ConfigError
)

from .models import ChainInfo, SubgraphInfo, Sample, UNKNOWN_BLOCK

from .metrics import (
    record_sample,
    calculate_sync_speed,
    compute_metrics,
    mark_fetch_failed,
    progress_percentage
)

from .registry import (
    WatchlistRegistry,
    validate_watchlist,
    group_subgraphs_by_chain,
    load_watchlist
)

from .dispatcher import (
    update_chain_blocks,
    process_subgraph,
    process_chain_subgraphs,
    dispatch_sync_check,
    run_scheduler
)

__all__ = [
    # Errors
    "MonitorError",
    "TransportError",
    "DecodeError",
    "ProtocolError",
    "ConfigError",
    # Models
    "ChainInfo",
    "SubgraphInfo",
    "Sample",
    "UNKNOWN_BLOCK",
    # Metrics
    "record_sample",
    "calculate_sync_speed",
    "compute_metrics",
    "mark_fetch_failed",
    "progress_percentage",
    # Registry
    "WatchlistRegistry",
    "validate_watchlist",
    "group_subgraphs_by_chain",
    "load_watchlist",
    # Dispatcher
    "update_chain_blocks",
    "process_subgraph",
    "process_chain_subgraphs",
    "dispatch_sync_check",
    "run_scheduler",
]
