"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidInput(DomainException, ValueError):
    """A calculation precondition was violated (amount, rate, term or score out of range)"""

    pass
