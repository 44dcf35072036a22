"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class ParseError(DomainException):
    """Input row, date, amount or program could not be parsed"""

    pass


class DuplicateUserError(DomainException):
    """Starting ledger lists the same user more than once"""

    def __init__(self, user_id: str):
        super().__init__(f"Duplicate user in starting ledger: {user_id}")
        self.user_id = user_id


class UnknownUserError(DomainException):
    """Transaction references a user missing from the starting ledger"""

    def __init__(self, user_id: str):
        super().__init__(f"Transaction for unknown user: {user_id}")
        self.user_id = user_id


class UnknownProgramError(DomainException):
    """Account program has no penalty rule"""

    pass
