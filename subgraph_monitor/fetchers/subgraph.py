"""
Subgraph Fetcher - Currently indexed block of a subgraph.

Queries the `_meta` field that every Graph Node deployment exposes.
"""

import requests

from ..config.settings import HTTP_TIMEOUT_SECONDS, USER_AGENT
from ..core.errors import TransportError, DecodeError, ProtocolError

META_BLOCK_QUERY = "{_meta{block{number}}}"


def extract_block_number(body) -> int:
    """
    Pull data._meta.block.number out of a decoded GraphQL response.

    Raises:
        ProtocolError: Response carries GraphQL errors or a non-positive block
        DecodeError: Response does not have the expected shape
    """
    if not isinstance(body, dict):
        raise DecodeError(f"unexpected GraphQL response: {body!r}")

    errors = body.get("errors")
    if errors is not None and not isinstance(errors, list):
        raise DecodeError(f"GraphQL errors is not a list: {errors!r}")
    if errors:
        first = errors[0]
        message = first.get("message", "Unknown") if isinstance(first, dict) else str(first)
        raise ProtocolError(f"GraphQL errors: {message}")

    try:
        number = body["data"]["_meta"]["block"]["number"]
    except (KeyError, TypeError) as e:
        raise DecodeError(f"missing _meta.block.number in response: {body!r}") from e

    # bool is an int subclass
    if isinstance(number, bool) or not isinstance(number, int):
        raise DecodeError(f"block number is not an integer: {number!r}")

    if number <= 0:
        raise ProtocolError(f"invalid block number: {number}")

    return number


def fetch_current_block(query_url: str, timeout: float = HTTP_TIMEOUT_SECONDS) -> int:
    """
    Fetch the block a subgraph has indexed up to.

    Args:
        query_url: Subgraph GraphQL endpoint
        timeout: Request timeout in seconds

    Returns:
        Indexed block height

    Raises:
        TransportError: Connection failure, timeout or non-2xx status
        DecodeError: Malformed JSON or unexpected shape
        ProtocolError: GraphQL errors or non-positive block number
    """
    try:
        response = requests.post(
            query_url,
            json={"query": META_BLOCK_QUERY},
            headers={
                "Content-Type": "application/json",
                "Accept": "application/json",
                "User-Agent": USER_AGENT
            },
            timeout=timeout
        )
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

    return extract_block_number(body)
