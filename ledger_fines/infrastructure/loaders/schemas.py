"""Pydantic schemas for CSV row validation"""

import re
from pydantic import BaseModel, ConfigDict, Field, field_validator
from ledger_fines.domain.models import LedgerEntry, Program, TransactionRecord
from ledger_fines.utils.date_utils import is_iso_date

# Plain signed integers only, no underscores, decimals or exponents
INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_integer(value):
    """Convert an integer cell, leaving non-string input to pydantic"""
    if isinstance(value, str):
        value = value.strip()
        if not INTEGER_PATTERN.fullmatch(value):
            raise ValueError(f"expected an integer, got {value!r}")
        return int(value)
    return value


class LedgerRow(BaseModel):
    """Row of the starting ledger: user_id, initial_amount, program"""

    model_config = ConfigDict(str_strip_whitespace=True)

    user_id: str = Field(..., min_length=1, description="User identifier")
    initial_amount: int = Field(..., description="Opening balance")
    program: Program = Field(..., description="Penalty program, 1 or 2")

    @field_validator("initial_amount", "program", mode="before")
    @classmethod
    def parse_numbers(cls, value):
        return parse_integer(value)

    def to_domain(self) -> LedgerEntry:
        return LedgerEntry(
            user_id=self.user_id,
            initial_amount=self.initial_amount,
            program=self.program,
        )


class TransactionRow(BaseModel):
    """Row of a monthly transaction file: date, user_id, amount"""

    model_config = ConfigDict(str_strip_whitespace=True)

    date: str = Field(..., description="Transaction date, YYYY-MM-DD")
    user_id: str = Field(..., min_length=1, description="User identifier")
    amount: int = Field(..., description="Signed amount, negative for withdrawals")

    @field_validator("date")
    @classmethod
    def check_date(cls, value: str) -> str:
        if not is_iso_date(value):
            raise ValueError(f"expected YYYY-MM-DD, got {value!r}")
        return value

    @field_validator("amount", mode="before")
    @classmethod
    def parse_amount(cls, value):
        return parse_integer(value)

    def to_domain(self) -> TransactionRecord:
        return TransactionRecord(date=self.date, user_id=self.user_id, amount=self.amount)
