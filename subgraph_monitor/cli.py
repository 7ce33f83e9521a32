"""
Command line entry point.

Usage:
    python -m subgraph_monitor
    python -m subgraph_monitor --config example_watchlist_config.json
    python -m subgraph_monitor --once --log-level DEBUG
    python -m subgraph_monitor --example
"""

import argparse
import copy
import json
import logging
import sys

from .config.settings import (
    CHECK_INTERVAL_MINUTES,
    DEFAULT_MAX_HISTORY_ENTRIES,
    DEFAULT_WATCHLIST,
    LOG_LEVEL
)
from .core.dispatcher import run_scheduler
from .core.errors import ConfigError
from .core.registry import load_watchlist

logger = logging.getLogger(__name__)


def setup_logging(level: str) -> None:
    """Send diagnostics to stderr so they stay out of the stdout table."""
    logging.basicConfig(
        stream=sys.stderr,
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Subgraph Sync Monitor")
    parser.add_argument("--config", "-c", type=str, help="Path to JSON watchlist file")
    parser.add_argument("--interval", "-i", type=float, default=CHECK_INTERVAL_MINUTES,
                        help=f"Minutes between checks (default: {CHECK_INTERVAL_MINUTES:g})")
    parser.add_argument("--once", action="store_true", help="Run a single check and exit")
    parser.add_argument("--log-level", type=str, default=LOG_LEVEL, help="Logging level (default: INFO)")
    parser.add_argument("--example", action="store_true", help="Print example watchlist and exit")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    if args.example:
        example = copy.deepcopy(DEFAULT_WATCHLIST)
        for sg in example["subgraphs"]:
            sg.setdefault("max_history_entries", DEFAULT_MAX_HISTORY_ENTRIES)
        print(json.dumps(example, indent=2))
        return 0

    setup_logging(args.log_level)

    if args.interval <= 0:
        logger.error("--interval must be positive, got %s", args.interval)
        return 2

    try:
        registry = load_watchlist(args.config)
    except ConfigError as e:
        logger.error("%s", e)
        return 2

    logger.info(
        "Watching %d subgraphs on %d chains every %g minutes",
        len(registry.subgraphs), len(registry.chains), args.interval
    )

    try:
        run_scheduler(
            registry,
            interval_seconds=args.interval * 60,
            max_cycles=1 if args.once else None
        )
    except KeyboardInterrupt:
        logger.info("Stopped")

    return 0


if __name__ == "__main__":
    sys.exit(main())
