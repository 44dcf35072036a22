"""Prometheus metrics for batch runs, exported through the textfile collector format"""

from prometheus_client import CollectorRegistry, Counter, Gauge, write_to_textfile

registry = CollectorRegistry()

# Input metrics
rows_loaded_counter = Counter(
    "ledger_fines_rows_loaded_total",
    "CSV rows loaded",
    ["kind"],  # ledger | transaction
    registry=registry,
)

dropped_transactions_counter = Counter(
    "ledger_fines_dropped_transactions_total",
    "Transactions dropped for users missing from the ledger",
    registry=registry,
)

# Outcome metrics
fined_accounts_gauge = Gauge(
    "ledger_fines_fined_accounts",
    "Accounts owing a fine in the last run",
    registry=registry,
)

fines_amount_gauge = Gauge(
    "ledger_fines_fines_amount",
    "Sum of fines owed in the last run",
    registry=registry,
)

last_success_gauge = Gauge(
    "ledger_fines_last_success_timestamp_seconds",
    "Completion time of the last successful run",
    registry=registry,
)


def record_rows(kind: str, count: int) -> None:
    rows_loaded_counter.labels(kind=kind).inc(count)


def record_run(fined_accounts: int, fines_amount: int, dropped: int) -> None:
    """Record the outcome of a successful run"""
    if dropped:
        dropped_transactions_counter.inc(dropped)
    fined_accounts_gauge.set(fined_accounts)
    fines_amount_gauge.set(fines_amount)
    last_success_gauge.set_to_current_time()


def write_metrics(path: str) -> None:
    """Write the registry in Prometheus text format"""
    write_to_textfile(path, registry)
