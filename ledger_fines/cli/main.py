"""Command line entry point: ledger-fines"""

import argparse
import logging
import sys
from typing import List, Optional

from ledger_fines.cli.writer import write_report
from ledger_fines.config import settings
from ledger_fines.domain.exceptions import DomainException
from ledger_fines.infrastructure.observability.logging import setup_logging
from ledger_fines.pipeline import run_files


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="ledger-fines",
        description="Monthly top depositors, most active users and program fines",
    )
    parser.add_argument(
        "transactions",
        nargs="*",
        help="Monthly transaction CSV files (date, user_id, amount)",
    )
    parser.add_argument(
        "--starting",
        type=str,
        default=None,
        help="Starting ledger CSV file (user_id, initial_amount, program)",
    )
    parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Report output format",
    )
    parser.add_argument(
        "--duplicates",
        choices=["error", "last_write_wins"],
        default=None,
        help="What to do when the starting ledger repeats a user",
    )
    parser.add_argument(
        "--unknown-users",
        choices=["drop", "error"],
        default=None,
        help="What to do with transactions for users missing from the ledger",
    )
    parser.add_argument(
        "--metrics-file",
        type=str,
        default=None,
        help="Write Prometheus metrics to this file after the run",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    overrides = {
        "duplicate_user_policy": args.duplicates,
        "unknown_user_policy": args.unknown_users,
        "metrics_textfile": args.metrics_file,
    }
    run_settings = settings.model_copy(update={k: v for k, v in overrides.items() if v is not None})
    setup_logging(run_settings.log_level)

    try:
        report = run_files(args.starting, args.transactions or None, run_settings)
    except DomainException as e:
        logging.error(f"Run aborted: {e}", extra={"step": "run_failed"})
        return 1
    except OSError as e:
        logging.error(f"Cannot read input: {e}", extra={"step": "run_failed"})
        return 1

    write_report(report, args.format)
    return 0


if __name__ == "__main__":
    sys.exit(main())
