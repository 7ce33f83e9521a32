"""
Watchlist Registry - Holds the chains and subgraphs being monitored.

The registry is created once at startup and passed into every cycle, so the
chain head blocks and subgraph histories it owns persist between cycles.
"""

import copy
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..config.settings import DEFAULT_MAX_HISTORY_ENTRIES, DEFAULT_WATCHLIST, WATCHLIST_PATH
from .errors import ConfigError
from .models import ChainInfo, SubgraphInfo

logger = logging.getLogger(__name__)

REQUIRED_CHAIN_FIELDS = ["name", "rpc_url"]
REQUIRED_SUBGRAPH_FIELDS = ["name", "url", "chain"]


def validate_watchlist(config: Dict[str, Any]) -> Dict[str, Any]:
    """
    Validate a watchlist dict.

    Returns:
        Dict with:
        - is_valid: bool
        - errors: List of error messages
        - warnings: List of warning messages
    """
    errors = []
    warnings = []

    if not isinstance(config, dict):
        return {"is_valid": False, "errors": ["watchlist must be a JSON object"], "warnings": []}

    chains = config.get("chains")
    subgraphs = config.get("subgraphs")

    if not isinstance(chains, dict) or not chains:
        errors.append("chains must be a non-empty mapping of chain id to chain config")
        chains = {}
    if not isinstance(subgraphs, list) or not subgraphs:
        errors.append("subgraphs must be a non-empty list")
        subgraphs = []

    for chain_id, chain in chains.items():
        if not isinstance(chain, dict):
            errors.append(f"chain {chain_id}: must be an object")
            continue
        for key in REQUIRED_CHAIN_FIELDS:
            if not chain.get(key):
                errors.append(f"chain {chain_id}: {key} is required")

    for i, sg in enumerate(subgraphs):
        if not isinstance(sg, dict):
            errors.append(f"subgraph #{i}: must be an object")
            continue
        label = sg.get("name") or f"#{i}"
        for key in REQUIRED_SUBGRAPH_FIELDS:
            if not sg.get(key):
                errors.append(f"subgraph {label}: {key} is required")

        start_block = sg.get("start_block", 0)
        if not isinstance(start_block, int) or start_block < 0:
            errors.append(f"subgraph {label}: start_block must be a non-negative integer")
        elif start_block == 0:
            warnings.append(f"subgraph {label}: no start_block, progress will show 0%")

        window = sg.get("max_history_entries", DEFAULT_MAX_HISTORY_ENTRIES)
        if not isinstance(window, int) or window < 1:
            errors.append(f"subgraph {label}: max_history_entries must be a positive integer")

        if sg.get("chain") and sg["chain"] not in chains:
            warnings.append(f"subgraph {label}: unknown chain {sg['chain']}, it will be skipped")

    return {
        "is_valid": len(errors) == 0,
        "errors": errors,
        "warnings": warnings
    }


class WatchlistRegistry:
    """
    Chains keyed by identifier plus the ordered list of subgraphs.

    Subgraphs reference chains by identifier only; lookups happen per cycle.
    """

    def __init__(self, chains: Dict[str, ChainInfo], subgraphs: List[SubgraphInfo]):
        self.chains = chains
        self.subgraphs = subgraphs

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> "WatchlistRegistry":
        """
        Build a registry from a watchlist dict.

        Raises:
            ConfigError: If the watchlist fails validation
        """
        validation = validate_watchlist(config)
        if not validation["is_valid"]:
            raise ConfigError("Invalid watchlist: " + "; ".join(validation["errors"]))
        for warning in validation["warnings"]:
            logger.warning(warning)

        chains = {
            chain_id: ChainInfo(
                chain_id=chain_id,
                name=chain["name"],
                rpc_url=chain["rpc_url"]
            )
            for chain_id, chain in config["chains"].items()
        }
        subgraphs = [
            SubgraphInfo(
                name=sg["name"],
                url=sg["url"],
                chain=sg["chain"],
                start_block=sg.get("start_block", 0),
                max_history_entries=sg.get("max_history_entries", DEFAULT_MAX_HISTORY_ENTRIES)
            )
            for sg in config["subgraphs"]
        ]
        return cls(chains, subgraphs)

    @classmethod
    def from_file(cls, file_path: str) -> "WatchlistRegistry":
        """
        Build a registry from a JSON watchlist file.

        Raises:
            ConfigError: If the file is unreadable, not JSON, or invalid
        """
        try:
            with open(file_path, 'r') as f:
                config = json.load(f)
        except OSError as e:
            raise ConfigError(f"Cannot read watchlist {file_path}: {e}") from e
        except json.JSONDecodeError as e:
            raise ConfigError(f"Watchlist {Path(file_path).name} is not valid JSON: {e}") from e

        return cls.from_dict(config)

    @classmethod
    def default(cls) -> "WatchlistRegistry":
        """Registry for the built-in watchlist."""
        return cls.from_dict(copy.deepcopy(DEFAULT_WATCHLIST))

    def get_chain(self, chain_id: str) -> Optional[ChainInfo]:
        return self.chains.get(chain_id)


def group_subgraphs_by_chain(subgraphs: List[SubgraphInfo]) -> Dict[str, List[SubgraphInfo]]:
    """
    Group subgraphs by chain identifier, keeping configuration order.

    Rebuilt every cycle, so it never holds state of its own.
    """
    groups: Dict[str, List[SubgraphInfo]] = {}
    for sg in subgraphs:
        groups.setdefault(sg.chain, []).append(sg)
    return groups


def load_watchlist(file_path: Optional[str] = None) -> WatchlistRegistry:
    """
    Load the watchlist from a file, WATCHLIST_PATH, or the built-in default.

    Args:
        file_path: Optional path to a JSON watchlist

    Returns:
        WatchlistRegistry
    """
    path = file_path or WATCHLIST_PATH
    if path:
        logger.info("Loading watchlist from %s", path)
        return WatchlistRegistry.from_file(path)
    return WatchlistRegistry.default()
