"""Program penalty rules"""

from typing import Dict
from ledger_fines.domain.models import Program, ProgramRule
from ledger_fines.domain.exceptions import UnknownProgramError

# Waived if the month reaches $300 deposited, 5 transactions or a $1200 balance
PROGRAM_1 = ProgramRule(
    deposit_threshold=300,
    transaction_threshold=5,
    balance_threshold=1200,
    penalty_amount=8,
)

# Waived if the month reaches $800 deposited, 1 transaction or a $5000 balance
PROGRAM_2 = ProgramRule(
    deposit_threshold=800,
    transaction_threshold=1,
    balance_threshold=5000,
    penalty_amount=4,
)

PROGRAM_RULES: Dict[Program, ProgramRule] = {
    Program.ONE: PROGRAM_1,
    Program.TWO: PROGRAM_2,
}


def rule_for(program: Program) -> ProgramRule:
    """Look up the penalty rule of a program"""
    try:
        return PROGRAM_RULES[program]
    except KeyError as e:
        raise UnknownProgramError(f"No penalty rule for program {program!r}") from e
