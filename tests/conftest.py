"""
Pytest configuration and fixtures for the Subgraph Sync Monitor.

This file contains shared fixtures used across all test modules.
Fixtures follow the pattern: factory functions with sensible defaults.
"""

import pytest
import json
import copy
from pathlib import Path
from typing import Dict, Any
from unittest.mock import MagicMock, patch
from datetime import datetime, timedelta

from subgraph_monitor.core.models import ChainInfo, SubgraphInfo


# =============================================================================
# PATH FIXTURES
# =============================================================================

@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


# =============================================================================
# CONFIG FIXTURES
# =============================================================================

@pytest.fixture
def sample_watchlist_config(project_root: Path) -> Dict[str, Any]:
    """Load the example watchlist configuration."""
    config_path = project_root / "example_watchlist_config.json"
    with open(config_path, "r") as f:
        return json.load(f)


@pytest.fixture
def minimal_watchlist() -> Dict[str, Any]:
    """
    Minimal valid watchlist for unit testing.
    One chain with two subgraphs.
    """
    return {
        "chains": {
            "testchain": {"name": "TestChain", "rpc_url": "http://rpc.test"}
        },
        "subgraphs": [
            {
                "name": "Alpha",
                "url": "http://graph.test/alpha",
                "chain": "testchain",
                "start_block": 500,
                "max_history_entries": 3
            },
            {
                "name": "Beta",
                "url": "http://graph.test/beta",
                "chain": "testchain",
                "start_block": 0
            }
        ]
    }


@pytest.fixture
def watchlist_factory(minimal_watchlist):
    """
    Factory fixture for creating custom watchlists.

    Usage:
        def test_something(watchlist_factory):
            config = watchlist_factory(chains={})
    """
    def _create(**overrides) -> Dict[str, Any]:
        base = copy.deepcopy(minimal_watchlist)
        base.update(overrides)
        return base

    return _create


# =============================================================================
# MODEL FIXTURES
# =============================================================================

@pytest.fixture
def t0() -> datetime:
    """Fixed observation start time."""
    return datetime(2024, 1, 1, 12, 0, 0)


@pytest.fixture
def subgraph_factory():
    """
    Factory fixture for SubgraphInfo.

    Usage:
        sg = subgraph_factory(max_history_entries=2, start_block=100)
    """
    def _create(**overrides) -> SubgraphInfo:
        params = {
            "name": "Test Subgraph",
            "url": "http://graph.test/subgraph",
            "chain": "testchain",
            "start_block": 0,
            "max_history_entries": 6
        }
        params.update(overrides)
        return SubgraphInfo(**params)

    return _create


@pytest.fixture
def chain_factory():
    """Factory fixture for ChainInfo."""
    def _create(**overrides) -> ChainInfo:
        params = {
            "chain_id": "testchain",
            "name": "TestChain",
            "rpc_url": "http://rpc.test",
            "latest_block": 0
        }
        params.update(overrides)
        return ChainInfo(**params)

    return _create


@pytest.fixture
def fixed_clock(t0):
    """Clock callable that returns t0 on every call."""
    return lambda: t0


@pytest.fixture
def stepping_clock(t0):
    """
    Clock callable that advances one minute per call.

    Usage:
        clock = stepping_clock
        clock()  # t0
        clock()  # t0 + 1 min
    """
    state = {"calls": 0}

    def _clock() -> datetime:
        value = t0 + timedelta(minutes=state["calls"])
        state["calls"] += 1
        return value

    return _clock


# =============================================================================
# MOCK FIXTURES FOR HTTP
# =============================================================================

@pytest.fixture
def mock_response_factory():
    """
    Build a mock requests.Response.

    Usage:
        response = mock_response_factory(json_data={"result": "0x10"})
        response = mock_response_factory(status_code=502, text="bad gateway")
    """
    def _create(json_data=None, status_code: int = 200, text: str = "", json_error: Exception = None):
        response = MagicMock()
        response.status_code = status_code
        response.ok = 200 <= status_code < 300
        response.text = text
        if json_error is not None:
            response.json.side_effect = json_error
        else:
            response.json.return_value = json_data
        return response

    return _create


@pytest.fixture
def mock_requests_post():
    """
    Mock requests.post for fetcher testing.

    Usage:
        def test_fetch(mock_requests_post, mock_response_factory):
            mock_requests_post.return_value = mock_response_factory(json_data={...})
    """
    with patch("requests.post") as mock_post:
        yield mock_post


@pytest.fixture
def rpc_block_response() -> Dict[str, Any]:
    """Sample eth_blockNumber response (block 1000)."""
    return {"jsonrpc": "2.0", "id": 1, "result": "0x3e8"}


@pytest.fixture
def graphql_meta_response() -> Dict[str, Any]:
    """Sample subgraph _meta response (block 900)."""
    return {"data": {"_meta": {"block": {"number": 900}}}}
