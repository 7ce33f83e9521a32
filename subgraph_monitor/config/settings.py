"""
Monitor configuration.

Polling cadence, HTTP settings and the built-in watchlist.
"""

import os

from .. import __version__

# Scheduler cadence (in minutes)
CHECK_INTERVAL_MINUTES = float(os.getenv("CHECK_INTERVAL_MINUTES", 10))

# Per-request timeout for chain RPC and subgraph queries (in seconds)
HTTP_TIMEOUT_SECONDS = float(os.getenv("HTTP_TIMEOUT_SECONDS", 10))

# Samples kept per subgraph for sync speed estimation
DEFAULT_MAX_HISTORY_ENTRIES = int(os.getenv("MAX_HISTORY_ENTRIES", 6))

USER_AGENT = os.getenv("SUBGRAPH_MONITOR_USER_AGENT", f"subgraph-monitor/{__version__}")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Optional watchlist JSON file, overrides DEFAULT_WATCHLIST
WATCHLIST_PATH = os.getenv("WATCHLIST_PATH")

DEFAULT_WATCHLIST = {
    "chains": {
        "pulsechain": {
            "name": "PulseChain",
            "rpc_url": "https://rpc.pulsechain.com",
        },
    },
    "subgraphs": [
        {
            "name": "pDEX PulseChain Exchange 1",
            "url": "https://graph.pulsechain.com/subgraphs/name/pulsechain/pulsex",
            "chain": "pulsechain",
            "start_block": 23287990,
        },
    ],
}
