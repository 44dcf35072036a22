"""Report builder - monthly leaders and the fines list"""

from typing import Callable, Dict, List
from ledger_fines.domain.models import (
    Account,
    MonthlyAggregate,
    MonthlyLeader,
    MonthlyReport,
    RunReport,
)
from ledger_fines.domain.aggregation import months_present
from ledger_fines.domain.penalties import account_fines


def no_data(month: str) -> MonthlyLeader:
    return MonthlyLeader(month_key=month, user_id=None, value=0)


def most_by(
    metric: Callable[[MonthlyAggregate], int],
    month: str,
    aggregates: Dict[str, List[MonthlyAggregate]],
) -> MonthlyLeader:
    """
    Account with the largest metric value for a month.

    Only accounts with at least one transaction that month compete.
    Ties go to the lexicographically smallest user id.
    """
    candidates = [
        a
        for account_aggregates in aggregates.values()
        for a in account_aggregates
        if a.month_key == month and a.transaction_count > 0
    ]
    if not candidates:
        return no_data(month)

    best = min(candidates, key=lambda a: (-metric(a), a.user_id))
    return MonthlyLeader(month_key=month, user_id=best.user_id, value=metric(best))


def most_deposited(month: str, aggregates: Dict[str, List[MonthlyAggregate]]) -> MonthlyLeader:
    return most_by(lambda a: a.total_deposited, month, aggregates)


def most_transactions(month: str, aggregates: Dict[str, List[MonthlyAggregate]]) -> MonthlyLeader:
    return most_by(lambda a: a.transaction_count, month, aggregates)


def build_report(
    accounts: Dict[str, Account],
    aggregates: Dict[str, List[MonthlyAggregate]],
    dropped_transactions: int = 0,
) -> RunReport:
    """Monthly leaders for every month present, followed by the fines owed"""
    months = [
        MonthlyReport(
            month_key=month,
            top_depositor=most_deposited(month, aggregates),
            top_transactor=most_transactions(month, aggregates),
        )
        for month in months_present(accounts.values())
    ]
    return RunReport(
        months=months,
        fines=account_fines(accounts, aggregates),
        dropped_transactions=dropped_transactions,
    )
