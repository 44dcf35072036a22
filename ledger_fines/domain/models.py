"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Dict, List, Optional


class Program(IntEnum):
    """Account program, selects the penalty rule"""

    ONE = 1
    TWO = 2


@dataclass(frozen=True)
class TransactionRecord:
    """Single row of a monthly transaction file"""

    date: str  # YYYY-MM-DD
    user_id: str
    amount: int  # positive = deposit, negative = withdrawal


@dataclass(frozen=True)
class LedgerEntry:
    """Single row of the starting ledger"""

    user_id: str
    initial_amount: int
    program: Program


@dataclass
class Account:
    """Account with its transactions bucketed by month key"""

    user_id: str
    initial_amount: int
    program: Program
    transactions: Dict[str, List[TransactionRecord]] = field(default_factory=dict)


@dataclass(frozen=True)
class MonthlyAggregate:
    """Per-account summary of one month"""

    user_id: str
    month_key: str
    total_deposited: int
    transaction_count: int
    ending_balance: int


@dataclass(frozen=True)
class ProgramRule:
    """Waiver thresholds and the monthly penalty of a program"""

    deposit_threshold: int
    transaction_threshold: int
    balance_threshold: int
    penalty_amount: int


@dataclass(frozen=True)
class MonthlyPenalty:
    """Outcome of the rule evaluation for one month"""

    month_key: str
    waived: bool
    penalty: int


@dataclass
class PenaltyReport:
    """Fines owed by one account across all months"""

    user_id: str
    total_fines: int
    months: List[MonthlyPenalty] = field(default_factory=list)


@dataclass(frozen=True)
class MonthlyLeader:
    """Account with the largest value for a month, user_id is None when no data"""

    month_key: str
    user_id: Optional[str]
    value: int

    @property
    def has_data(self) -> bool:
        return self.user_id is not None


@dataclass
class MonthlyReport:
    """Leaders for one month"""

    month_key: str
    top_depositor: MonthlyLeader
    top_transactor: MonthlyLeader


@dataclass
class RunReport:
    """Output of a full pipeline run"""

    months: List[MonthlyReport]
    fines: List[PenaltyReport]
    dropped_transactions: int = 0
