"""Pipeline entry points - ledger and transactions in, run report out"""

import logging
import time
from typing import Iterable, Optional, Sequence
from ledger_fines.config import Settings, settings as default_settings
from ledger_fines.domain.accounts import (
    DuplicatePolicy,
    UnknownUserPolicy,
    build_account_index,
    group_transactions,
)
from ledger_fines.domain.aggregation import aggregate_accounts
from ledger_fines.domain.models import LedgerEntry, RunReport, TransactionRecord
from ledger_fines.domain.reports import build_report
from ledger_fines.infrastructure.loaders.csv_reader import load_ledger, load_transactions
from ledger_fines.infrastructure.observability.logging import log_run_summary
from ledger_fines.infrastructure.observability.metrics import record_run, write_metrics


def run(
    ledger: Iterable[LedgerEntry],
    transaction_batches: Sequence[Iterable[TransactionRecord]],
    duplicate_policy: DuplicatePolicy = "error",
    unknown_user_policy: UnknownUserPolicy = "drop",
) -> RunReport:
    """
    Build the run report from in-memory inputs.

    Flow:
    1. Index the starting ledger by user id
    2. Group every transaction batch by user and month
    3. Aggregate deposits, counts and balances per month
    4. Derive monthly leaders and the fines owed
    """
    start_time = time.time()

    accounts = build_account_index(ledger, duplicate_policy=duplicate_policy)
    grouped = group_transactions(
        accounts,
        *transaction_batches,
        unknown_user_policy=unknown_user_policy,
    )
    aggregates = aggregate_accounts(grouped.accounts)
    report = build_report(grouped.accounts, aggregates, dropped_transactions=grouped.dropped)

    duration_ms = (time.time() - start_time) * 1000
    record_run(
        fined_accounts=len(report.fines),
        fines_amount=sum(f.total_fines for f in report.fines),
        dropped=grouped.dropped,
    )
    log_run_summary(
        accounts=len(grouped.accounts),
        months=len(report.months),
        fined_accounts=len(report.fines),
        dropped_transactions=grouped.dropped,
        duration_ms=duration_ms,
    )
    return report


def run_files(
    starting_path: Optional[str] = None,
    transaction_paths: Optional[Sequence[str]] = None,
    settings: Optional[Settings] = None,
) -> RunReport:
    """Load the CSV inputs and run the pipeline, paths default to the settings"""
    settings = settings or default_settings
    starting_path = starting_path or settings.starting_data_path
    transaction_paths = list(transaction_paths or settings.transaction_paths)

    logging.info(
        "Loading inputs",
        extra={"step": "load", "starting": starting_path, "transaction_files": transaction_paths},
    )
    ledger = load_ledger(starting_path)
    # Every file is parsed before grouping starts
    batches = [load_transactions(path) for path in transaction_paths]

    report = run(
        ledger,
        batches,
        duplicate_policy=settings.duplicate_user_policy,
        unknown_user_policy=settings.unknown_user_policy,
    )

    if settings.metrics_textfile:
        write_metrics(settings.metrics_textfile)
    return report
