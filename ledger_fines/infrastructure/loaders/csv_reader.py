"""CSV reader for the starting ledger and monthly transaction files"""

import logging
from typing import List, Sequence, Type, TypeVar
import pandas as pd
from pydantic import BaseModel, ValidationError
from ledger_fines.domain.models import LedgerEntry, TransactionRecord
from ledger_fines.domain.exceptions import ParseError
from ledger_fines.infrastructure.loaders.schemas import LedgerRow, TransactionRow
from ledger_fines.infrastructure.observability.metrics import record_rows

LEDGER_COLUMNS = ["user_id", "initial_amount", "program"]
TRANSACTION_COLUMNS = ["date", "user_id", "amount"]

RowT = TypeVar("RowT", bound=BaseModel)


def read_rows(path: str, columns: Sequence[str], schema: Type[RowT]) -> List[RowT]:
    """
    Read a CSV file into validated row models.

    The file's header row is replaced by `columns` and every row must have
    exactly that many fields. Cells are read as text and converted by the
    schema, so the first bad row, blank rows included, aborts the load.

    Raises:
        ParseError: On malformed CSV structure or an invalid row
    """
    try:
        df = pd.read_csv(
            path,
            header=None,
            index_col=False,
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=False,
            skipinitialspace=True,
        )
    except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as e:
        raise ParseError(f"{path}: unreadable CSV: {e}") from e

    if df.shape[1] != len(columns):
        raise ParseError(f"{path}: expected {len(columns)} columns, got {df.shape[1]}")

    # Drop the header row, the index stays aligned with 0-based file lines
    df = df.iloc[1:]
    df.columns = list(columns)

    rows = []
    for index, record in zip(df.index, df.to_dict(orient="records")):
        try:
            rows.append(schema.model_validate(record))
        except ValidationError as e:
            raise ParseError(f"{path}:{index + 1}: invalid row: {e.errors()[0]['msg']}") from e

    logging.debug("Loaded CSV", extra={"path": path, "rows": len(rows)})
    return rows


def load_ledger(path: str) -> List[LedgerEntry]:
    """Starting ledger rows: user_id, initial_amount, program"""
    entries = [row.to_domain() for row in read_rows(path, LEDGER_COLUMNS, LedgerRow)]
    record_rows("ledger", len(entries))
    return entries


def load_transactions(path: str) -> List[TransactionRecord]:
    """Monthly transaction rows: date, user_id, amount"""
    records = [row.to_domain() for row in read_rows(path, TRANSACTION_COLUMNS, TransactionRow)]
    record_rows("transaction", len(records))
    return records
