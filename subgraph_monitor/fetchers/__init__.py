"""
Block height fetchers.

Available fetchers:
- chain: latest head block via JSON-RPC eth_blockNumber
- subgraph: indexed block via GraphQL _meta query
"""

from .chain import fetch_latest_block, decode_block_hex
from .subgraph import fetch_current_block, extract_block_number

__all__ = [
    "fetch_latest_block",
    "decode_block_hex",
    "fetch_current_block",
    "extract_block_number",
]
