"""
Domain exceptions for the donation ledger

These exceptions represent business rule violations and storage failures.
Each one carries a short human-readable message; the invoker hands that
message back to the caller as the operation's failure result.
"""


class DonationDomainError(Exception):
    """Base exception for all donation ledger errors"""

    @property
    def message(self) -> str:
        return str(self.args[0]) if self.args else self.__class__.__name__


class InvalidArgument(DonationDomainError):
    """Raised on wrong argument count, wrong argument type, or a key holding the wrong kind of record"""
    pass


class NotFound(DonationDomainError):
    """Raised when a referenced key is absent or its value is empty"""
    pass


class OwnershipMismatch(DonationDomainError):
    """Raised when an NPO asserts authority over an Asset it does not own"""
    pass


class StorageFailure(DonationDomainError):
    """Raised when the underlying get/put/delete/scan fails"""
    pass


class InvalidTransition(DonationDomainError):
    """Raised when an asset or need status transition is not allowed"""
    pass


class DuplicateRecord(DonationDomainError):
    """Raised when enrolling or proposing an id that is already on the ledger"""
    pass
