"""
Report output.

Supports:
- Console table (stdout)
"""

from .console import (
    format_eta,
    format_current_block,
    format_chain_header,
    format_subgraph_row,
    print_chain_header,
    print_subgraph_status,
    print_chain_report,
)

__all__ = [
    "format_eta",
    "format_current_block",
    "format_chain_header",
    "format_subgraph_row",
    "print_chain_header",
    "print_subgraph_status",
    "print_chain_report",
]
