"""
Subgraph Sync Monitor.

Polls chain RPC endpoints and subgraph indexers and reports indexing lag,
sync speed and ETA per subgraph on a fixed interval.

Quick Start:
    from subgraph_monitor import load_watchlist, dispatch_sync_check

    registry = load_watchlist("example_watchlist_config.json")

    # Run one check cycle
    result = dispatch_sync_check(registry)
    print(f"Processed {result['subgraphs_processed']} subgraphs")
"""

__version__ = "1.0.0"

# Core components
from .core import (
    # Errors
    MonitorError,
    TransportError,
    DecodeError,
    ProtocolError,
    ConfigError,
    # Models
    ChainInfo,
    SubgraphInfo,
    UNKNOWN_BLOCK,
    # Metrics
    record_sample,
    compute_metrics,
    mark_fetch_failed,
    progress_percentage,
    # Registry
    WatchlistRegistry,
    load_watchlist,
    # Dispatcher
    dispatch_sync_check,
    run_scheduler,
)

# Fetchers
from .fetchers import fetch_latest_block, fetch_current_block

__all__ = [
    # Version
    "__version__",
    # Errors
    "MonitorError",
    "TransportError",
    "DecodeError",
    "ProtocolError",
    "ConfigError",
    # Models
    "ChainInfo",
    "SubgraphInfo",
    "UNKNOWN_BLOCK",
    # Metrics
    "record_sample",
    "compute_metrics",
    "mark_fetch_failed",
    "progress_percentage",
    # Registry
    "WatchlistRegistry",
    "load_watchlist",
    # Dispatcher
    "dispatch_sync_check",
    "run_scheduler",
    # Fetchers
    "fetch_latest_block",
    "fetch_current_block",
]
