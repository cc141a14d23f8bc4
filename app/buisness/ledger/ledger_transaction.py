"""
LedgerTransaction - explicit batch-write boundary for one ledger operation

Holds the working copy of every record an operation reads or writes. Reads
after writes are served from the working copy, and nothing reaches the
ledger tables until commit(), which writes every staged put/delete under one
transaction id and commits the session. Any failure rolls everything back.
"""

import uuid
from typing import Dict, Optional, Tuple
from app.buisness.ledger.ledger_adapter import LedgerAdapter
from app.buisness.donations.errors import StorageFailure
from app.logger import get_logger

logger = get_logger("donation_ledger.buisness.ledger.transaction")

NOT_CACHED = object()


class LedgerTransaction:
    """
    Unit of work over the ledger.

    Usage:
        with LedgerTransaction() as tx:
            donors = RecordRepository(tx, Donor)
            ...
        # committed on clean exit, rolled back on exception
    """

    def __init__(self, adapter: Optional[LedgerAdapter] = None, tx_id: Optional[str] = None):
        self.adapter = adapter or LedgerAdapter()
        self.tx_id = tx_id or uuid.uuid4().hex
        # key -> record, or None for a record deleted in this transaction
        self._records: Dict[str, object] = {}
        # key -> record / None in staging order
        self._writes: Dict[str, object] = {}
        self._closed = False

    def __enter__(self) -> 'LedgerTransaction':
        return self

    def __exit__(self, exc_type, exc, tb):
        if exc_type is not None:
            self.rollback()
            return False
        if not self._closed:
            self.commit()
        return False

    # ========== Working copy ==========

    def cached(self, key: str):
        """Working-copy entry for key: a record, None (deleted here), or NOT_CACHED"""
        return self._records.get(key, NOT_CACHED)

    def remember(self, key: str, record) -> None:
        self._records[key] = record

    def fetch(self, key: str) -> Optional[Tuple[str, bytes]]:
        """(kind, bytes) for a key, honouring records staged in this transaction"""
        cached = self.cached(key)
        if cached is None:
            return None
        if cached is not NOT_CACHED:
            return cached.KIND, cached.to_bytes()
        return self.adapter.get_with_kind(key)

    def exists(self, key: str) -> bool:
        return self.fetch(key) is not None

    def stage_put(self, record) -> None:
        self._ensure_open()
        self._records[record.id] = record
        self._writes[record.id] = record

    def stage_delete(self, key: str) -> None:
        self._ensure_open()
        self._records[key] = None
        self._writes[key] = None

    @property
    def pending_keys(self):
        return list(self._writes.keys())

    def is_deleted(self, key: str) -> bool:
        return key in self._records and self._records[key] is None

    # ========== Commit / rollback ==========

    def commit(self) -> None:
        """Write every staged record, then commit the session"""
        self._ensure_open()
        try:
            for key, record in self._writes.items():
                if record is None:
                    self.adapter.delete(key, self.tx_id)
                else:
                    self.adapter.put(key, record.to_bytes(), record.KIND, self.tx_id)
            self.adapter.commit()
        except StorageFailure:
            self.rollback()
            raise
        logger.debug(f"Committed ledger transaction {self.tx_id} ({len(self._writes)} writes)")
        self._closed = True

    def rollback(self) -> None:
        if self._writes:
            logger.info(f"Rolling back ledger transaction {self.tx_id} ({len(self._writes)} staged writes)")
        self._records.clear()
        self._writes.clear()
        self.adapter.rollback()
        self._closed = True

    def _ensure_open(self) -> None:
        if self._closed:
            raise StorageFailure(f"Ledger transaction {self.tx_id} is already closed")
