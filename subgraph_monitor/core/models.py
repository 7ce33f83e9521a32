"""
Data model for monitored chains and subgraphs.

Chains are keyed by identifier in a lookup table; subgraphs only hold the
chain identifier and resolve it against that table each cycle.
"""

from collections import deque
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Deque, NamedTuple

from ..config.settings import DEFAULT_MAX_HISTORY_ENTRIES

# Current block value of a subgraph whose last fetch failed
UNKNOWN_BLOCK = 0


class Sample(NamedTuple):
    """One (block height, observation time) reading of a subgraph."""
    block: int
    timestamp: datetime


@dataclass
class ChainInfo:
    """A blockchain network and its most recently observed head block."""
    chain_id: str
    name: str
    rpc_url: str
    latest_block: int = 0


@dataclass
class SubgraphInfo:
    """A subgraph deployment and the sync metrics derived for it."""
    name: str
    url: str
    chain: str
    start_block: int = 0
    max_history_entries: int = DEFAULT_MAX_HISTORY_ENTRIES
    current_block: int = UNKNOWN_BLOCK
    last_block: int = 0
    blocks_behind: int = 0
    sync_speed: float = 0.0  # blocks per minute
    estimated_time_left: timedelta = field(default_factory=timedelta)
    history: Deque[Sample] = field(init=False, repr=False)

    def __post_init__(self):
        if self.max_history_entries < 1:
            raise ValueError(f"max_history_entries must be >= 1, got {self.max_history_entries}")
        self.history = deque(maxlen=self.max_history_entries)
