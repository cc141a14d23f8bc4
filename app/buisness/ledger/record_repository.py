"""
Typed record repositories

One RecordRepository per record kind, all sharing a LedgerTransaction so
every record an operation touches lives in the same working copy.
"""

from typing import Generic, List, Optional, Type, TypeVar
from app.buisness.ledger.ledger_transaction import LedgerTransaction, NOT_CACHED
from app.buisness.donations.errors import InvalidArgument, NotFound, StorageFailure
from app.data.donations import Asset, Donor, NPO, Need, Recipient

R = TypeVar('R')


class RecordRepository(Generic[R]):
    """
    Typed get/put/delete/scan for one record kind.

    A key that holds a record of another kind is reported as InvalidArgument;
    an absent key or an empty value as NotFound.
    """

    def __init__(self, tx: LedgerTransaction, record_cls: Type[R]):
        self.tx = tx
        self.record_cls = record_cls
        self.kind = record_cls.KIND

    def find(self, key: str) -> Optional[R]:
        """Load a record, or None if the key is absent or empty"""
        cached = self.tx.cached(key)
        if cached is None:
            return None
        if cached is not NOT_CACHED:
            if not isinstance(cached, self.record_cls):
                raise InvalidArgument(f"Record '{key}' is a {cached.KIND}, not a {self.kind}")
            return cached

        found = self.tx.adapter.get_with_kind(key)
        if found is None:
            return None
        kind, value = found
        if kind != self.kind:
            raise InvalidArgument(f"Record '{key}' is a {kind}, not a {self.kind}")
        record = self._decode(key, value)
        if record.is_empty():
            return None
        self.tx.remember(key, record)
        return record

    def get(self, key: str) -> R:
        """Load a record or raise NotFound"""
        record = self.find(key)
        if record is None:
            raise NotFound(f"{self.kind} '{key}' not found")
        return record

    def put(self, record: R) -> None:
        if not record.id:
            raise InvalidArgument(f"{self.kind} id must not be empty")
        self.tx.stage_put(record)

    def delete(self, key: str) -> None:
        self.tx.stage_delete(key)

    def all(self) -> List[R]:
        """Every record of this kind, ordered by key, including staged changes"""
        records = {}
        for key, value in self.tx.adapter.scan_kind(self.kind):
            records[key] = self._decode(key, value)
        for key in self.tx.pending_keys:
            cached = self.tx.cached(key)
            if cached is None:
                records.pop(key, None)
            elif isinstance(cached, self.record_cls):
                records[key] = cached
        return [records[key] for key in sorted(records) if not records[key].is_empty()]

    def _decode(self, key: str, value: bytes) -> R:
        try:
            return self.record_cls.from_bytes(value)
        except ValueError as e:
            raise StorageFailure(f"Stored value for '{key}' is not a valid {self.kind} record") from e


class LedgerRepositories:
    """Repository per record kind over one transaction"""

    def __init__(self, tx: LedgerTransaction):
        self.tx = tx
        self.donors = RecordRepository(tx, Donor)
        self.npos = RecordRepository(tx, NPO)
        self.recipients = RecordRepository(tx, Recipient)
        self.assets = RecordRepository(tx, Asset)
        self.needs = RecordRepository(tx, Need)

    def key_exists(self, key: str) -> bool:
        """True if any kind of record is stored under key"""
        return self.tx.exists(key)
