"""
LedgerAdapter - key-value access to the ledger tables

get/put/delete by key, lexical range scans, per-kind scans and per-key
change history. Every SQLAlchemy failure is re-raised as StorageFailure so
callers only ever see domain errors.

Writes are flushed but never committed here; LedgerTransaction owns the
commit boundary.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional, Tuple
from sqlalchemy.exc import SQLAlchemyError
from app import db
from app.data.ledger.ledger_entry import LedgerEntry
from app.data.ledger.ledger_history import LedgerHistory
from app.buisness.donations.errors import StorageFailure
from app.logger import get_logger

logger = get_logger("donation_ledger.buisness.ledger.adapter")


@dataclass(frozen=True)
class HistoryRecord:
    tx_id: str
    value: Optional[bytes]
    timestamp: Optional[datetime]
    is_delete: bool


class LedgerAdapter:
    """
    Thin adapter over LedgerEntry / LedgerHistory.

    Args:
        session: SQLAlchemy session to use (defaults to db.session)
    """

    def __init__(self, session=None):
        self.session = session if session is not None else db.session

    # ========== Single-key operations ==========

    def get(self, key: str) -> Optional[bytes]:
        found = self.get_with_kind(key)
        return found[1] if found else None

    def get_with_kind(self, key: str) -> Optional[Tuple[str, bytes]]:
        """Return (kind, value) for a key, or None if the key is absent"""
        try:
            entry = self.session.get(LedgerEntry, key)
        except SQLAlchemyError as e:
            logger.error(f"Failed to get state for {key}: {e}")
            raise StorageFailure(f"Failed to get state for {key}") from e
        if entry is None:
            return None
        return entry.kind, entry.value

    def kind_of(self, key: str) -> Optional[str]:
        found = self.get_with_kind(key)
        return found[0] if found else None

    def put(self, key: str, value: bytes, kind: str, tx_id: str) -> None:
        """Store value under key and append a history row"""
        try:
            entry = self.session.get(LedgerEntry, key)
            if entry is None:
                entry = LedgerEntry(key=key, kind=kind, value=value, tx_id=tx_id)
                self.session.add(entry)
            else:
                entry.kind = kind
                entry.value = value
                entry.tx_id = tx_id
            self.session.add(LedgerHistory(key=key, tx_id=tx_id, value=value, is_delete=False))
            self.session.flush()
        except SQLAlchemyError as e:
            logger.error(f"Could not store {kind} {key}: {e}")
            raise StorageFailure(f"Could not store {key}") from e

    def delete(self, key: str, tx_id: str) -> bool:
        """
        Remove a key. Deleting an absent key is a no-op.

        Returns:
            bool: True if a value was removed
        """
        try:
            entry = self.session.get(LedgerEntry, key)
            if entry is None:
                return False
            self.session.delete(entry)
            self.session.add(LedgerHistory(key=key, tx_id=tx_id, value=None, is_delete=True))
            self.session.flush()
        except SQLAlchemyError as e:
            logger.error(f"Could not delete {key}: {e}")
            raise StorageFailure(f"Could not delete {key}") from e
        return True

    # ========== Scans ==========

    def range_scan(self, start_key: str, end_key: str) -> List[Tuple[str, bytes]]:
        """Lexical scan over [start_key, end_key), ordered by key"""
        try:
            entries = (
                LedgerEntry.query
                .filter(LedgerEntry.key >= start_key, LedgerEntry.key < end_key)
                .order_by(LedgerEntry.key)
                .all()
            )
        except SQLAlchemyError as e:
            raise StorageFailure(f"Range scan {start_key}..{end_key} failed") from e
        return [(entry.key, entry.value) for entry in entries]

    def scan_kind(self, kind: str) -> List[Tuple[str, bytes]]:
        """All values of one record kind, ordered by key"""
        try:
            entries = (
                LedgerEntry.query
                .filter(LedgerEntry.kind == kind)
                .order_by(LedgerEntry.key)
                .all()
            )
        except SQLAlchemyError as e:
            raise StorageFailure(f"Scan of {kind} records failed") from e
        return [(entry.key, entry.value) for entry in entries]

    def history_scan(self, key: str) -> List[HistoryRecord]:
        """Chronological change log for one key, oldest first"""
        try:
            rows = (
                LedgerHistory.query
                .filter(LedgerHistory.key == key)
                .order_by(LedgerHistory.id)
                .all()
            )
        except SQLAlchemyError as e:
            raise StorageFailure(f"History scan for {key} failed") from e
        return [
            HistoryRecord(tx_id=row.tx_id, value=row.value, timestamp=row.recorded_at, is_delete=row.is_delete)
            for row in rows
        ]

    # ========== Transaction boundary ==========

    def commit(self) -> None:
        try:
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error(f"Ledger commit failed: {e}")
            raise StorageFailure("Could not commit ledger transaction") from e

    def rollback(self) -> None:
        self.session.rollback()
