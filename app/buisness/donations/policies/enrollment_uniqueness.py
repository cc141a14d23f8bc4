"""
Enrollment Uniqueness Policy

Ids share one key space across every record kind, so a new donor, NPO,
recipient, need or asset may not reuse any existing key.
"""

from typing import TYPE_CHECKING
from app.buisness.donations.errors import DuplicateRecord, InvalidArgument

if TYPE_CHECKING:
    from app.buisness.ledger.record_repository import LedgerRepositories


class EnrollmentUniquenessPolicy:
    """
    Rejects enrollment of an id that is already on the ledger.

    With allow_overwrite the old behaviour applies: re-enrolling an id of the
    same kind silently replaces the record. Replacing a record of a different
    kind is never allowed.
    """

    @classmethod
    def check(cls, repos: 'LedgerRepositories', key: str, kind: str, allow_overwrite: bool = False) -> None:
        """
        Args:
            repos: Repositories bound to the current transaction
            key: Id about to be written
            kind: Kind of record about to be written
            allow_overwrite: Permit replacing an existing record of the same kind

        Raises:
            InvalidArgument: If the id is blank
            DuplicateRecord: If the id is already taken
        """
        if not key or not key.strip():
            raise InvalidArgument(f"{kind} id must not be empty")

        found = repos.tx.fetch(key)
        if found is None:
            return

        existing_kind, _ = found
        if allow_overwrite and existing_kind == kind:
            return
        raise DuplicateRecord(f"Id '{key}' is already enrolled as a {existing_kind}")
