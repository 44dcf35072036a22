"""Pytest fixtures for testing"""

import logging
import pytest
from pathlib import Path
from typing import Callable, List
from ledger_fines.domain.models import Account, LedgerEntry, Program, TransactionRecord


RESOURCES = Path(__file__).resolve().parent.parent / "resources"


def tx(date: str, user_id: str, amount: int) -> TransactionRecord:
    return TransactionRecord(date=date, user_id=user_id, amount=amount)


@pytest.fixture
def sample_ledger() -> List[LedgerEntry]:
    """Four users covering both programs"""
    return [
        LedgerEntry(user_id="101", initial_amount=0, program=Program.ONE),
        LedgerEntry(user_id="102", initial_amount=4000, program=Program.TWO),
        LedgerEntry(user_id="103", initial_amount=1500, program=Program.ONE),
        LedgerEntry(user_id="104", initial_amount=250, program=Program.TWO),
    ]


@pytest.fixture
def sample_batches() -> List[List[TransactionRecord]]:
    """January to March, same data as the bundled resources"""
    jan = [
        tx("2017-01-03", "101", 100),
        tx("2017-01-09", "101", 100),
        tx("2017-01-15", "101", 100),
        tx("2017-01-20", "101", -10),
        tx("2017-01-28", "101", -10),
        tx("2017-01-11", "104", 500),
        tx("2017-01-19", "104", -120),
    ]
    feb = [
        tx("2017-02-02", "101", 500),
        tx("2017-02-14", "104", 500),
        tx("2017-02-21", "103", -400),
    ]
    mar = [
        tx("2017-03-05", "103", -50),
        tx("2017-03-17", "101", -200),
        tx("2017-03-30", "104", 900),
    ]
    return [jan, feb, mar]


@pytest.fixture
def make_account() -> Callable[..., Account]:
    """Build an account with transactions already bucketed by month"""

    def _make(user_id: str = "1", initial_amount: int = 0, program: Program = Program.ONE, records=()):
        account = Account(user_id=user_id, initial_amount=initial_amount, program=program)
        for record in records:
            account.transactions.setdefault(record.date[5:7], []).append(record)
        return account

    return _make


@pytest.fixture
def write_csv(tmp_path: Path) -> Callable[[str, str], str]:
    """Write CSV text into tmp_path and return its path"""

    def _write(name: str, content: str) -> str:
        path = tmp_path / name
        path.write_text(content.strip() + "\n")
        return str(path)

    return _write


@pytest.fixture
def resources() -> Path:
    return RESOURCES


@pytest.fixture
def restore_logging():
    """Put back the root logger handlers replaced by setup_logging"""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
