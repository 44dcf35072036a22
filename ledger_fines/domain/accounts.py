"""Account index and transaction grouping"""

import copy
import logging
from dataclasses import dataclass
from typing import Dict, Iterable, Literal
from ledger_fines.domain.models import Account, LedgerEntry, TransactionRecord
from ledger_fines.domain.exceptions import DuplicateUserError, UnknownUserError
from ledger_fines.utils.date_utils import month_key

DuplicatePolicy = Literal["error", "last_write_wins"]
UnknownUserPolicy = Literal["drop", "error"]

AccountIndex = Dict[str, Account]


@dataclass
class GroupingResult:
    """Account index with transactions attached, plus what was left out"""

    accounts: AccountIndex
    dropped: int = 0


def build_account_index(
    entries: Iterable[LedgerEntry],
    duplicate_policy: DuplicatePolicy = "error",
) -> AccountIndex:
    """
    Index starting ledger rows by user id.

    Accounts start with no transactions. A repeated user id raises
    DuplicateUserError, or replaces the earlier row with "last_write_wins".
    """
    accounts: AccountIndex = {}
    for entry in entries:
        if entry.user_id in accounts:
            if duplicate_policy == "error":
                raise DuplicateUserError(entry.user_id)
            logging.warning(
                "Duplicate ledger row replaces earlier one",
                extra={"user_id": entry.user_id, "step": "account_index"},
            )
        accounts[entry.user_id] = Account(
            user_id=entry.user_id,
            initial_amount=entry.initial_amount,
            program=entry.program,
        )
    return accounts


def add_transaction(accounts: AccountIndex, record: TransactionRecord) -> bool:
    """Append a record to its user's month bucket, False if the user is unknown"""
    account = accounts.get(record.user_id)
    if account is None:
        return False
    account.transactions.setdefault(month_key(record.date), []).append(record)
    return True


def group_transactions(
    accounts: AccountIndex,
    *batches: Iterable[TransactionRecord],
    unknown_user_policy: UnknownUserPolicy = "drop",
) -> GroupingResult:
    """
    Attach every transaction batch to the account index, bucketed by month.

    Works on a copy: the index passed in is left untouched, and the result is
    only returned once every batch has been grouped.
    """
    grouped = copy.deepcopy(accounts)
    dropped = 0

    for batch in batches:
        for record in batch:
            if add_transaction(grouped, record):
                continue
            if unknown_user_policy == "error":
                raise UnknownUserError(record.user_id)
            dropped += 1
            logging.warning(
                "Dropped transaction for unknown user",
                extra={"user_id": record.user_id, "date": record.date, "step": "group_transactions"},
            )

    return GroupingResult(accounts=grouped, dropped=dropped)
