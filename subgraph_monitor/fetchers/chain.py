"""
Chain Fetcher - Latest block height from an EVM JSON-RPC endpoint.

Sends a single eth_blockNumber request and decodes the hex result.
"""

import requests
from web3 import Web3

from ..config.settings import HTTP_TIMEOUT_SECONDS
from ..core.errors import TransportError, DecodeError, ProtocolError

BLOCK_NUMBER_REQUEST = {
    "jsonrpc": "2.0",
    "method": "eth_blockNumber",
    "params": [],
    "id": 1
}


def decode_block_hex(value) -> int:
    """
    Decode a 0x-prefixed hex quantity into a block height.

    Raises:
        DecodeError: If the value is not a 0x-prefixed hex string
    """
    if not isinstance(value, str) or not value.lower().startswith("0x"):
        raise DecodeError(f"parse block error: expected 0x-prefixed hex, got {value!r}")
    try:
        return Web3.to_int(hexstr=value)
    except ValueError as e:
        raise DecodeError(f"parse block error: {e}") from e


def fetch_latest_block(rpc_url: str, timeout: float = HTTP_TIMEOUT_SECONDS) -> int:
    """
    Fetch the latest block height of a chain.

    Args:
        rpc_url: JSON-RPC endpoint URL
        timeout: Request timeout in seconds

    Returns:
        Latest block height

    Raises:
        TransportError: Connection failure, timeout or non-2xx status
        ProtocolError: RPC response carries an error message
        DecodeError: Malformed JSON or missing/invalid result
    """
    try:
        response = requests.post(rpc_url, json=BLOCK_NUMBER_REQUEST, timeout=timeout)
    except requests.exceptions.RequestException as e:
        raise TransportError(f"HTTP error: {e}") from e

    if not response.ok:
        raise TransportError(
            f"HTTP {response.status_code}: {response.text}",
            status_code=response.status_code,
            body=response.text
        )

    try:
        body = response.json()
    except ValueError as e:
        raise DecodeError(f"JSON error: {e}") from e

    if not isinstance(body, dict):
        raise DecodeError(f"unexpected RPC response: {body!r}")

    error = body.get("error") or {}
    message = error.get("message") if isinstance(error, dict) else str(error)
    if message:
        raise ProtocolError(f"RPC error: {message}")

    if "result" not in body:
        raise DecodeError("RPC response has no result")

    return decode_block_hex(body["result"])
