from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import asdict
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from stackdeps.app import describe_capabilities, reconcile_stack_files
from stackdeps.config import ConfigurationError, configure_logging, get_reconciler_config

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Reconcile configuration metadata with stack components"
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    reconcile = subparsers.add_parser(
        "reconcile",
        help="Apply stack definitions to a configuration bundle",
    )
    reconcile.add_argument(
        "--config",
        type=Path,
        required=True,
        help="Configuration bundle JSON file",
    )
    reconcile.add_argument(
        "--stack",
        type=Path,
        action="append",
        required=True,
        help="Stack definition JSON file; repeat to switch stacks in order",
    )
    reconcile.add_argument(
        "--output",
        type=Path,
        help="Write the reconciled configuration bundle to this path",
    )

    capabilities = subparsers.add_parser(
        "capabilities",
        help="Show the components of a stack grouped by capability",
    )
    capabilities.add_argument(
        "--stack",
        type=Path,
        required=True,
        help="Stack definition JSON file",
    )

    return parser.parse_args(list(argv))


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    try:
        parsed_args = _parse_args(args_list)
        configure_logging(level=logging.DEBUG if parsed_args.verbose else None)
        config = get_reconciler_config()
    except (ValueError, ConfigurationError):
        log.exception("CLI validation error")
        sys.exit(2)

    try:
        if parsed_args.command == "reconcile":
            session = reconcile_stack_files(
                config_path=parsed_args.config,
                stack_paths=parsed_args.stack,
                output_path=parsed_args.output,
                config=config,
            )
            for entry in session.reconciler.ledger:
                log.info(
                    "Disabled %s/%s: properties=%s, review=%s",
                    entry.service_name,
                    entry.component_name,
                    entry.property_count,
                    entry.review_component is not None,
                )
        elif parsed_args.command == "capabilities":
            result = describe_capabilities(parsed_args.stack)
            for name, components in asdict(result).items():
                log.info("%s: %s", name, ", ".join(components) or "-")
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301

    except ValueError:
        log.exception("Invalid input")
        sys.exit(2)
    except Exception:
        log.exception("Fatal error during reconciliation")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
