"""Penalty rule evaluation - monthly waivers and accumulated fines"""

from typing import Dict, List
from ledger_fines.domain.models import (
    Account,
    MonthlyAggregate,
    MonthlyPenalty,
    PenaltyReport,
    ProgramRule,
)
from ledger_fines.domain.programs import rule_for


def is_waived(aggregate: MonthlyAggregate, rule: ProgramRule) -> bool:
    """
    Any satisfied predicate waives the month's penalty:
    - deposited at least the deposit threshold
    - made at least the threshold number of transactions
    - ended the month at or above the balance threshold
    """
    return (
        aggregate.total_deposited >= rule.deposit_threshold
        or aggregate.transaction_count >= rule.transaction_threshold
        or aggregate.ending_balance >= rule.balance_threshold
    )


def evaluate_month(aggregate: MonthlyAggregate, rule: ProgramRule) -> MonthlyPenalty:
    waived = is_waived(aggregate, rule)
    return MonthlyPenalty(
        month_key=aggregate.month_key,
        waived=waived,
        penalty=0 if waived else rule.penalty_amount,
    )


def evaluate_account(account: Account, aggregates: List[MonthlyAggregate]) -> PenaltyReport:
    """Sum the account's penalties across every aggregated month"""
    rule = rule_for(account.program)
    months = [evaluate_month(aggregate, rule) for aggregate in aggregates]
    return PenaltyReport(
        user_id=account.user_id,
        total_fines=sum(m.penalty for m in months),
        months=months,
    )


def account_fines(
    accounts: Dict[str, Account],
    aggregates: Dict[str, List[MonthlyAggregate]],
) -> List[PenaltyReport]:
    """Penalty reports of the accounts owing a fine, in ledger order"""
    reports = (
        evaluate_account(account, aggregates.get(user_id, []))
        for user_id, account in accounts.items()
    )
    return [report for report in reports if report.total_fines > 0]
