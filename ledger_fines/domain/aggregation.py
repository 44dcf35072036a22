"""Monthly aggregation - deposits, transaction counts and running balances"""

from typing import Dict, Iterable, List, Sequence, Tuple
from ledger_fines.domain.models import Account, MonthlyAggregate, TransactionRecord
from ledger_fines.utils.date_utils import sorted_months


def total_deposited(records: Iterable[TransactionRecord]) -> int:
    """Sum of the positive amounts"""
    return sum(r.amount for r in records if r.amount > 0)


def transaction_count(records: Sequence[TransactionRecord]) -> int:
    """Deposits and withdrawals alike"""
    return len(records)


def net_amount(records: Iterable[TransactionRecord]) -> int:
    return sum(r.amount for r in records)


def months_present(accounts: Iterable[Account]) -> List[str]:
    """Ascending union of the month keys found in any account"""
    return sorted_months(m for account in accounts for m in account.transactions)


def ending_balances(account: Account, months: Sequence[str]) -> List[Tuple[str, int]]:
    """
    Running end-of-month balance for each month, in order.

    The initial amount only seeds the fold and is never emitted as an entry.
    A month without transactions carries the previous balance forward.
    """
    balance = account.initial_amount
    balances = []
    for month in sorted(months):
        balance += net_amount(account.transactions.get(month, []))
        balances.append((month, balance))
    return balances


def aggregate_account(account: Account, months: Sequence[str]) -> List[MonthlyAggregate]:
    """Monthly aggregates of one account over the given months"""
    aggregates = []
    for month, balance in ending_balances(account, months):
        records = account.transactions.get(month, [])
        aggregates.append(
            MonthlyAggregate(
                user_id=account.user_id,
                month_key=month,
                total_deposited=total_deposited(records),
                transaction_count=transaction_count(records),
                ending_balance=balance,
            )
        )
    return aggregates


def aggregate_accounts(accounts: Dict[str, Account]) -> Dict[str, List[MonthlyAggregate]]:
    """
    Aggregate every account over the months present across all accounts.

    Every account gets an entry for every month, so months where a user made
    no transactions still show up with zero deposits and a carried balance.
    """
    months = months_present(accounts.values())
    return {user_id: aggregate_account(account, months) for user_id, account in accounts.items()}
